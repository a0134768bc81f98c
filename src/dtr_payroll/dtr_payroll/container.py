from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AdminAuthService
from .common.datetime_utils import now_local
from .database.connection import DatabaseConnection
from .payroll.service import PayrollReportService
from .people.mysql_person_repository import MySQLPersonRepository
from .people.repository import PersonRepository
from .people.service import PersonService
from .settings import AppSettings


@dataclass(frozen=True)
class Container:
    people_repo: PersonRepository
    attendance_repo: AttendanceRepository

    auth_service: AdminAuthService
    person_service: PersonService
    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService

    clock: Callable[[], datetime]


def build_services(
    settings: AppSettings,
    *,
    people_repo: PersonRepository,
    attendance_repo: AttendanceRepository,
    clock: Optional[Callable[[], datetime]] = None,
) -> Container:
    clock = clock or partial(now_local, settings.timezone)

    person_service = PersonService(people_repo)
    attendance_service = AttendanceService(attendance_repo, person_service, clock=clock)
    payroll_report_service = PayrollReportService(attendance_repo, people_repo, clock=clock)

    return Container(
        people_repo=people_repo,
        attendance_repo=attendance_repo,
        auth_service=AdminAuthService(settings.admin),
        person_service=person_service,
        attendance_service=attendance_service,
        payroll_report_service=payroll_report_service,
        clock=clock,
    )


def build_container(settings: AppSettings) -> Container:
    conn = DatabaseConnection.get_instance(settings.db)
    return build_services(
        settings,
        people_repo=MySQLPersonRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
