from __future__ import annotations

from enum import Enum


class ScanAction(str, Enum):
    """Outcome of a token scan: which side of the interval was recorded."""

    IN = "IN"
    OUT = "OUT"

    @property
    def label(self) -> str:
        return "Clock IN" if self is ScanAction.IN else "Clock OUT"
