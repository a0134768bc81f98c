import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dtr_test_db"),
}

LOCK_WAIT_SECONDS = 2
CONNECT_TIMEOUT_SECONDS = 2

TIMEZONE = "Asia/Manila"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"
SESSION_MINUTES = 60

PUBLIC_BASE_URL = "http://dtr.test"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
