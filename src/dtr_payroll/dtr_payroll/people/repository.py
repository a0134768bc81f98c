from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Person


class PersonRepository(Protocol):
    """Identity store for the roster.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, person_id: int) -> Optional[Person]:
        raise NotImplementedError

    def get_by_token(self, token: str) -> Optional[Person]:
        raise NotImplementedError

    def list_people(self, *, active_only: bool = False) -> Sequence[Person]:
        """All people ordered by id."""

        raise NotImplementedError

    def create_person(self, *, name: str, role: str, hourly_rate: Decimal, token: str) -> int:
        raise NotImplementedError

    def toggle_active(self, person_id: int) -> Optional[bool]:
        """Flip the active flag; returns the new value or None if missing."""

        raise NotImplementedError

    def delete_by_id(self, person_id: int) -> bool:
        raise NotImplementedError
