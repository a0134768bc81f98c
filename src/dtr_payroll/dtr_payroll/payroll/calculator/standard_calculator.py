from __future__ import annotations

from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal

from ...attendance.model import AttendanceEvent
from ...core.constants import QUARTERS_PER_HOUR
from .base import PayrollCalculator

_ZERO = timedelta(0)
_MICROSECONDS_PER_QUARTER = Decimal(3600 * 1_000_000 // QUARTERS_PER_HOUR)


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: closed intervals only, rounded to the nearest quarter hour.

    - open events (no clock-out) credit nothing
    - out <= in credits nothing (never a negative adjustment)
    - the per-person sum is rounded half-up: round(hours * 4) / 4
    """

    def worked_time(self, event: AttendanceEvent) -> timedelta:
        if event.out_time is None:
            return _ZERO
        duration = event.out_time - event.in_time
        return duration if duration > _ZERO else _ZERO

    def billable_hours(self, worked: timedelta) -> Decimal:
        # Exact integer microseconds avoid float error at the .125 boundary.
        micros = Decimal(worked // timedelta(microseconds=1))
        quarters = (micros / _MICROSECONDS_PER_QUARTER).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return quarters / QUARTERS_PER_HOUR
