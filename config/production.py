import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dtr_db"),
}

LOCK_WAIT_SECONDS = int(os.getenv("LOCK_WAIT_SECONDS", "5"))
CONNECT_TIMEOUT_SECONDS = int(os.getenv("CONNECT_TIMEOUT_SECONDS", "5"))

TIMEZONE = os.getenv("TIMEZONE", "Asia/Manila")

# No default password in production: login stays disabled until one is set.
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
SESSION_MINUTES = int(os.getenv("SESSION_MINUTES", "60"))

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
