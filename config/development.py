import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dtr_db"),
}

# Bounded wait on row locks / connects (seconds)
LOCK_WAIT_SECONDS = int(os.getenv("LOCK_WAIT_SECONDS", "5"))
CONNECT_TIMEOUT_SECONDS = int(os.getenv("CONNECT_TIMEOUT_SECONDS", "5"))

TIMEZONE = os.getenv("TIMEZONE", "Asia/Manila")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin1234")
SESSION_MINUTES = int(os.getenv("SESSION_MINUTES", "60"))

# Base URL printed in scan links; defaults to the request host
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
