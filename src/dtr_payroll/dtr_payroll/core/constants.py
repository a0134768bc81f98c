"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_BYTES = 8
DEFAULT_LOCK_WAIT_SECONDS = 5
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5
DEFAULT_SESSION_MINUTES = 60
DEFAULT_TIMEZONE = "Asia/Manila"
QUARTERS_PER_HOUR = 4
DATE_FORMAT = "%Y-%m-%d"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
