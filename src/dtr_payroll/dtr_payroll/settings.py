from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .core.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_LOCK_WAIT_SECONDS,
    DEFAULT_SESSION_MINUTES,
    DEFAULT_TIMEZONE,
)
from .database.connection import DBConfig


@dataclass(frozen=True)
class AdminCredentials:
    username: str
    password: str


@dataclass(frozen=True)
class AppSettings:
    """Everything the app needs, resolved once from a settings module.

    Passed explicitly to the container and the Flask factory instead of being
    read from module globals at request time.
    """

    secret_key: str
    db: DBConfig
    admin: AdminCredentials
    timezone: str = DEFAULT_TIMEZONE
    session_minutes: int = DEFAULT_SESSION_MINUTES
    public_base_url: Optional[str] = None
    debug: bool = False
    testing: bool = False
    auto_init_db: bool = False


def load_settings(settings: ModuleType) -> AppSettings:
    db = DBConfig.from_dict(
        dict(getattr(settings, "DB_CONFIG", {})),
        lock_wait_seconds=int(getattr(settings, "LOCK_WAIT_SECONDS", DEFAULT_LOCK_WAIT_SECONDS)),
        connect_timeout_seconds=int(getattr(settings, "CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS)),
    )
    return AppSettings(
        secret_key=str(getattr(settings, "SECRET_KEY")),
        db=db,
        admin=AdminCredentials(
            username=str(getattr(settings, "ADMIN_USERNAME", "admin")),
            password=str(getattr(settings, "ADMIN_PASSWORD", "")),
        ),
        timezone=str(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)),
        session_minutes=int(getattr(settings, "SESSION_MINUTES", DEFAULT_SESSION_MINUTES)),
        public_base_url=getattr(settings, "PUBLIC_BASE_URL", None) or None,
        debug=bool(getattr(settings, "DEBUG", False)),
        testing=bool(getattr(settings, "TESTING", False)),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
