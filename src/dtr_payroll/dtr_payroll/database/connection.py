from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import mysql.connector

from ..core.constants import DEFAULT_CONNECT_TIMEOUT_SECONDS, DEFAULT_LOCK_WAIT_SECONDS


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    lock_wait_seconds: int = DEFAULT_LOCK_WAIT_SECONDS
    connect_timeout_seconds: int = DEFAULT_CONNECT_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict, **overrides) -> "DBConfig":
        values = dict(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "dtr_db")),
        )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: We create short-lived connections per operation (safe for a threaded
    WSGI server). Every connection gets a bounded InnoDB lock wait so contended
    scans fail with an error instead of hanging.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        conn = mysql.connector.connect(
            host=self._config.host,
            port=int(self._config.port),
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
            connection_timeout=int(self._config.connect_timeout_seconds),
            autocommit=False,
        )
        cur = conn.cursor()
        try:
            cur.execute("SET SESSION innodb_lock_wait_timeout = %s", (int(self._config.lock_wait_seconds),))
        finally:
            cur.close()
        return conn
