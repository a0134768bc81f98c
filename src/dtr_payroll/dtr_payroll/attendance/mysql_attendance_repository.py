from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Optional, Sequence

from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEvent
from .repository import AttendanceRepository, EventLogTransaction

_OPEN_EVENT_SQL = """
    SELECT id, faculty_id, in_time, out_time
    FROM dtr
    WHERE faculty_id=%s AND out_time IS NULL
    ORDER BY in_time DESC, id DESC
    LIMIT 1
"""


def _to_event(row: dict) -> AttendanceEvent:
    return AttendanceEvent(
        event_id=int(row["id"]),
        person_id=int(row["faculty_id"]),
        in_time=row["in_time"],
        out_time=row.get("out_time"),
    )


class _MySQLEventLogTransaction(EventLogTransaction):
    def __init__(self, cur):
        self._cur = cur

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        self._cur.execute(_OPEN_EVENT_SQL, (int(person_id),))
        row = fetchone(self._cur)
        return _to_event(row) if row else None

    def insert_event(self, person_id: int, in_time: datetime) -> int:
        self._cur.execute("INSERT INTO dtr(faculty_id, in_time) VALUES(%s,%s)", (int(person_id), in_time))
        return int(self._cur.lastrowid)

    def close_event(self, event_id: int, out_time: datetime) -> None:
        self._cur.execute(
            "UPDATE dtr SET out_time=%s WHERE id=%s AND out_time IS NULL",
            (out_time, int(event_id)),
        )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def locked_for_person(self, person_id: int) -> Iterator[EventLogTransaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            # The faculty row lock serializes scans of one person: a second
            # transaction blocks here until the first one commits.
            cur.execute("SELECT id FROM faculty WHERE id=%s FOR UPDATE", (int(person_id),))
            if not fetchone(cur):
                raise NotFoundError(f"Person {person_id} not found")
            yield _MySQLEventLogTransaction(cur)

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_OPEN_EVENT_SQL, (int(person_id),))
            row = fetchone(cur)
            return _to_event(row) if row else None

    def query_events_in_range(
        self,
        *,
        start: Optional[datetime],
        end: datetime,
        person_id: Optional[int] = None,
    ) -> Sequence[AttendanceEvent]:
        clauses = ["in_time <= %s"]
        params: list[object] = [end]

        if start is not None:
            clauses.append("in_time >= %s")
            params.append(start)
        if person_id is not None:
            clauses.append("faculty_id=%s")
            params.append(int(person_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, faculty_id, in_time, out_time
                FROM dtr
                WHERE {where}
                ORDER BY faculty_id ASC, in_time ASC, id ASC
                """,
                tuple(params),
            )
            return [_to_event(r) for r in fetchall(cur)]
