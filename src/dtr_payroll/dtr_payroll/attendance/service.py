from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ScanAction
from ..people.model import Person
from ..people.service import PersonService
from .model import AttendanceEvent, ScanResult
from .repository import AttendanceRepository


class AttendanceService:
    """Clock-in/clock-out state machine.

    Each person alternates between OUT (no open event) and IN (one open
    event). The state is always derived from the event log and never stored.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        people: PersonService,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._people = people
        self._clock = clock or now_local

    def record_scan(self, person_id: int, *, now: Optional[datetime] = None) -> ScanResult:
        """Record a scan for an already resolved person.

        Opens a new event when none is open, otherwise closes the open one.
        Exactly one insert or update happens, inside a transaction that holds
        the person's lock for the whole read-modify-write.
        """
        with self._attendance.locked_for_person(person_id) as log:
            now = now or self._clock()
            open_event = log.find_open_event(person_id)

            if open_event is None:
                event_id = log.insert_event(person_id, now)
                return ScanResult(action=ScanAction.IN, timestamp=now, event_id=event_id)

            log.close_event(open_event.event_id, now)
            return ScanResult(action=ScanAction.OUT, timestamp=now, event_id=open_event.event_id)

    def scan_token(self, token: str, *, now: Optional[datetime] = None) -> tuple[Person, ScanResult]:
        person = self._people.resolve_token(token)
        return person, self.record_scan(person.person_id, now=now)

    def is_clocked_in(self, person_id: int) -> bool:
        return self._attendance.find_open_event(person_id) is not None

    def get_history(
        self,
        person_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[AttendanceEvent]:
        self._people.get(person_id)
        return self._attendance.query_events_in_range(start=start, end=end or self._clock(), person_id=person_id)
