from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from decimal import Decimal

from ...attendance.model import AttendanceEvent


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_time(self, event: AttendanceEvent) -> timedelta:
        """Time credited for one event; never negative."""
        raise NotImplementedError

    @abstractmethod
    def billable_hours(self, worked: timedelta) -> Decimal:
        """Turn a person's summed worked time into payable hours."""
        raise NotImplementedError
