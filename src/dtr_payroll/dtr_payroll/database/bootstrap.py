from __future__ import annotations

import re
from contextlib import closing
from pathlib import Path
from typing import Iterator

import mysql.connector

from .connection import DBConfig

_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def schema_statements(sql: str) -> Iterator[str]:
    """Split schema.sql into executable statements.

    The schema holds only DDL and no literal contains a semicolon, so comments are
    dropped and the text is split on ';'.
    """
    for stmt in _LINE_COMMENT.sub("", sql).split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def _server_connection(db: DBConfig, *, select_database: bool):
    params = dict(
        host=db.host,
        port=db.port,
        user=db.user,
        password=db.password,
        connection_timeout=db.connect_timeout_seconds,
    )
    if select_database:
        params["database"] = db.database
    return closing(mysql.connector.connect(**params))


def ensure_database_exists(db: DBConfig) -> None:
    with _server_connection(db, select_database=False) as conn:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{db.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()


def apply_schema(db: DBConfig, *, schema_path: str | Path) -> None:
    """Create the configured database and its tables (idempotent)."""
    ensure_database_exists(db)
    sql = Path(schema_path).read_text(encoding="utf-8")

    with _server_connection(db, select_database=True) as conn:
        cur = conn.cursor()
        for stmt in schema_statements(sql):
            cur.execute(stmt)
        conn.commit()


def list_tables(db: DBConfig) -> list[str]:
    with _server_connection(db, select_database=True) as conn:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
