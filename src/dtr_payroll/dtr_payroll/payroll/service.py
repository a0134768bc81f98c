from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..people.repository import PersonRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollReport, PayrollRow


class PayrollReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        people: PersonRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._people = people
        self._calculator = calculator or StandardPayrollCalculator()
        self._clock = clock or now_local

    def compute_report(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        active_only: bool = False,
    ) -> PayrollReport:
        """Hours and pay per person for events clocked in within [start, end].

        Every listed person gets a row, including those without events. Both
        the interactive report and the CSV export are built from this result.
        """
        end = end or self._clock()

        people = sorted(self._people.list_people(active_only=active_only), key=lambda p: p.person_id)
        events = self._attendance.query_events_in_range(start=start, end=end)

        worked: dict[int, timedelta] = {p.person_id: timedelta(0) for p in people}
        for ev in events:
            # Orphaned events (deleted or filtered-out people) are ignored.
            if ev.person_id in worked:
                worked[ev.person_id] += self._calculator.worked_time(ev)

        rows: list[PayrollRow] = []
        for p in people:
            hours = self._calculator.billable_hours(worked[p.person_id])
            rows.append(
                PayrollRow(
                    person_id=p.person_id,
                    name=p.name,
                    role=p.role,
                    hourly_rate=p.hourly_rate,
                    total_hours=hours,
                    pay=hours * p.hourly_rate,
                )
            )

        grand_total = sum((r.pay for r in rows), Decimal(0))
        return PayrollReport(rows=tuple(rows), grand_total=grand_total)
