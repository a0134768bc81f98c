from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent


class EventLogTransaction(Protocol):
    """Event log operations bound to one person-scoped transaction."""

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        """Most recent event of the person without an out-time."""

        raise NotImplementedError

    def insert_event(self, person_id: int, in_time: datetime) -> int:
        raise NotImplementedError

    def close_event(self, event_id: int, out_time: datetime) -> None:
        raise NotImplementedError


class AttendanceRepository(Protocol):
    def locked_for_person(self, person_id: int) -> AbstractContextManager[EventLogTransaction]:
        """Serialize read-modify-write on one person's events.

        Concurrent callers for the same person wait for each other; the block
        commits on clean exit and rolls back on error. Raises NotFoundError if
        the person does not exist.
        """

        raise NotImplementedError

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def query_events_in_range(
        self,
        *,
        start: Optional[datetime],
        end: datetime,
        person_id: Optional[int] = None,
    ) -> Sequence[AttendanceEvent]:
        """Events whose in_time is in [start, end]; start None means unbounded."""

        raise NotImplementedError
