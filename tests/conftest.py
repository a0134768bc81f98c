from __future__ import annotations

import itertools
import threading
import time
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest

import config.testing as testing_settings
from dtr_payroll.attendance.model import AttendanceEvent
from dtr_payroll.attendance.service import AttendanceService
from dtr_payroll.container import build_services
from dtr_payroll.core.exceptions import NotFoundError, StorageError
from dtr_payroll.main import create_app
from dtr_payroll.payroll.service import PayrollReportService
from dtr_payroll.people.model import Person
from dtr_payroll.people.service import PersonService
from dtr_payroll.settings import load_settings


class InMemoryPeople:
    def __init__(self):
        self._by_id: dict[int, Person] = {}
        self._ids = itertools.count(1)

    def add(self, name: str, rate: str = "100", *, role: str = "Instructor", active: bool = True, token: Optional[str] = None) -> Person:
        person_id = next(self._ids)
        person = Person(
            person_id=person_id,
            name=name,
            role=role,
            hourly_rate=Decimal(rate),
            active=active,
            token=token or f"tok{person_id:04d}",
        )
        self._by_id[person_id] = person
        return person

    def get_by_id(self, person_id: int) -> Optional[Person]:
        return self._by_id.get(person_id)

    def get_by_token(self, token: str) -> Optional[Person]:
        return next((p for p in self._by_id.values() if p.token == token), None)

    def list_people(self, *, active_only: bool = False):
        people = sorted(self._by_id.values(), key=lambda p: p.person_id)
        return [p for p in people if p.active or not active_only]

    def create_person(self, *, name: str, role: str, hourly_rate: Decimal, token: str) -> int:
        return self.add(name, str(hourly_rate), role=role, token=token).person_id

    def toggle_active(self, person_id: int) -> Optional[bool]:
        p = self._by_id.get(person_id)
        if not p:
            return None
        self._by_id[person_id] = Person(
            person_id=p.person_id,
            name=p.name,
            role=p.role,
            hourly_rate=p.hourly_rate,
            active=not p.active,
            token=p.token,
        )
        return not p.active

    def delete_by_id(self, person_id: int) -> bool:
        return self._by_id.pop(person_id, None) is not None


class _InMemoryTransaction:
    """Stages writes; they only land in the log when the scope commits."""

    def __init__(self, log: "InMemoryAttendance"):
        self._log = log
        self._inserts: list[AttendanceEvent] = []
        self._closes: dict[int, datetime] = {}

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        if self._log.fail_reads:
            raise StorageError("simulated read failure")
        found = self._log.find_open_event(person_id)
        if self._log.race_window:
            time.sleep(self._log.race_window)
        return found

    def insert_event(self, person_id: int, in_time: datetime) -> int:
        event_id = self._log.next_id()
        self._inserts.append(AttendanceEvent(event_id=event_id, person_id=person_id, in_time=in_time))
        return event_id

    def close_event(self, event_id: int, out_time: datetime) -> None:
        if self._log.fail_writes:
            raise StorageError("simulated write failure")
        self._closes[event_id] = out_time

    def commit(self) -> None:
        self._log.apply(self._inserts, self._closes)


class InMemoryAttendance:
    def __init__(self, people: InMemoryPeople):
        self._people = people
        self._events: dict[int, AttendanceEvent] = {}
        self._ids = itertools.count(1)
        self._guard = threading.Lock()
        self._person_locks: dict[int, threading.Lock] = {}
        self.race_window = 0.0
        self.fail_reads = False
        self.fail_writes = False
        self.fail_queries = False

    def next_id(self) -> int:
        with self._guard:
            return next(self._ids)

    def add_event(self, person_id: int, in_time: datetime, out_time: Optional[datetime] = None) -> AttendanceEvent:
        ev = AttendanceEvent(event_id=self.next_id(), person_id=person_id, in_time=in_time, out_time=out_time)
        self._events[ev.event_id] = ev
        return ev

    def events(self) -> list[AttendanceEvent]:
        return sorted(self._events.values(), key=lambda e: e.event_id)

    def apply(self, inserts, closes) -> None:
        with self._guard:
            for ev in inserts:
                self._events[ev.event_id] = ev
            for event_id, out_time in closes.items():
                ev = self._events[event_id]
                self._events[event_id] = AttendanceEvent(
                    event_id=ev.event_id, person_id=ev.person_id, in_time=ev.in_time, out_time=out_time
                )

    @contextmanager
    def locked_for_person(self, person_id: int):
        if self._people.get_by_id(person_id) is None:
            raise NotFoundError(f"Person {person_id} not found")
        with self._guard:
            lock = self._person_locks.setdefault(person_id, threading.Lock())
        with lock:
            tx = _InMemoryTransaction(self)
            yield tx
            tx.commit()

    def find_open_event(self, person_id: int) -> Optional[AttendanceEvent]:
        with self._guard:
            open_events = [e for e in self._events.values() if e.person_id == person_id and e.out_time is None]
        open_events.sort(key=lambda e: (e.in_time, e.event_id), reverse=True)
        return open_events[0] if open_events else None

    def query_events_in_range(self, *, start: Optional[datetime], end: datetime, person_id: Optional[int] = None):
        if self.fail_queries:
            raise StorageError("simulated query failure")
        with self._guard:
            items = list(self._events.values())
        items = [
            e
            for e in items
            if e.in_time <= end
            and (start is None or e.in_time >= start)
            and (person_id is None or e.person_id == person_id)
        ]
        items.sort(key=lambda e: (e.person_id, e.in_time, e.event_id))
        return items


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 18, 0, 0)


@pytest.fixture
def people_repo() -> InMemoryPeople:
    return InMemoryPeople()


@pytest.fixture
def attendance_repo(people_repo) -> InMemoryAttendance:
    return InMemoryAttendance(people_repo)


@pytest.fixture
def person_service(people_repo) -> PersonService:
    return PersonService(people_repo)


@pytest.fixture
def attendance_service(attendance_repo, person_service, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_repo, person_service, clock=lambda: fixed_now)


@pytest.fixture
def payroll_service(attendance_repo, people_repo, fixed_now) -> PayrollReportService:
    return PayrollReportService(attendance_repo, people_repo, clock=lambda: fixed_now)


@pytest.fixture
def settings():
    return load_settings(testing_settings)


@pytest.fixture
def app(settings, people_repo, attendance_repo, fixed_now):
    container = build_services(
        settings,
        people_repo=people_repo,
        attendance_repo=attendance_repo,
        clock=lambda: fixed_now,
    )
    return create_app(settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    resp = client.post("/login", json={"username": "admin", "password": "test-password"})
    assert resp.status_code == 200
    return client
