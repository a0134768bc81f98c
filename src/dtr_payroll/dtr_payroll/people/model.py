from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Person:
    """Domain entity: a faculty/staff member on the roster.

    The token is embedded in the person's scannable code and never changes.
    """

    person_id: int
    name: str
    role: str
    hourly_rate: Decimal
    active: bool
    token: str
