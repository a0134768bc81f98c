from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import ScanAction


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one DTR row (clock-in with an optional clock-out)."""

    event_id: int
    person_id: int
    in_time: datetime
    out_time: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.out_time is None


@dataclass(frozen=True)
class ScanResult:
    action: ScanAction
    timestamp: datetime
    event_id: int
