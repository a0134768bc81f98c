from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Person
from .repository import PersonRepository

_COLUMNS = "id, name, role, rate_per_hour, active, token"


def _to_person(row: dict) -> Person:
    return Person(
        person_id=int(row["id"]),
        name=row["name"],
        role=row.get("role") or "",
        hourly_rate=Decimal(str(row["rate_per_hour"] or 0)),
        active=bool(row.get("active", True)),
        token=row["token"],
    )


class MySQLPersonRepository(PersonRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, person_id: int) -> Optional[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM faculty WHERE id=%s", (int(person_id),))
            row = fetchone(cur)
            return _to_person(row) if row else None

    def get_by_token(self, token: str) -> Optional[Person]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM faculty WHERE token=%s", (token,))
            row = fetchone(cur)
            return _to_person(row) if row else None

    def list_people(self, *, active_only: bool = False) -> Sequence[Person]:
        where = "WHERE active=1" if active_only else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM faculty {where} ORDER BY id ASC")
            return [_to_person(r) for r in fetchall(cur)]

    def create_person(self, *, name: str, role: str, hourly_rate: Decimal, token: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO faculty(name, role, rate_per_hour, active, token)
                VALUES(%s,%s,%s,1,%s)
                """,
                (name, role, hourly_rate, token),
            )
            return int(cur.lastrowid)

    def toggle_active(self, person_id: int) -> Optional[bool]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE faculty SET active=1-active WHERE id=%s", (int(person_id),))
            cur.execute("SELECT active FROM faculty WHERE id=%s", (int(person_id),))
            row = fetchone(cur)
            return bool(row["active"]) if row else None

    def delete_by_id(self, person_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM faculty WHERE id=%s", (int(person_id),))
            return cur.rowcount > 0
