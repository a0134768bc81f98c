from __future__ import annotations

import secrets
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_rate
from ..core.constants import TOKEN_BYTES
from ..core.exceptions import NotFoundError
from .model import Person
from .repository import PersonRepository


class PersonService:
    """Use case: manage the roster (register, activate/deactivate, remove)."""

    def __init__(self, people: PersonRepository, *, token_factory=None):
        self._people = people
        self._token_factory = token_factory or (lambda: secrets.token_hex(TOKEN_BYTES))

    def register(self, *, name: str, role: str, hourly_rate) -> Person:
        name = require_non_empty(name, "Name")
        role = (role or "").strip()
        rate = require_rate(hourly_rate)

        token = self._new_token()
        person_id = self._people.create_person(name=name, role=role, hourly_rate=rate, token=token)
        return Person(person_id=person_id, name=name, role=role, hourly_rate=rate, active=True, token=token)

    def _new_token(self) -> str:
        # faculty.token is unique; retry on collision.
        for _ in range(5):
            token = self._token_factory()
            if self._people.get_by_token(token) is None:
                return token
        raise RuntimeError("Could not allocate a unique token")

    def get(self, person_id: int) -> Person:
        person = self._people.get_by_id(person_id)
        if not person:
            raise NotFoundError(f"Person {person_id} not found")
        return person

    def resolve_token(self, token: str) -> Person:
        person = self._people.get_by_token((token or "").strip())
        if not person:
            raise NotFoundError("Unknown token")
        return person

    def list_people(self, *, active_only: bool = False) -> Sequence[Person]:
        return self._people.list_people(active_only=active_only)

    def toggle_active(self, person_id: int) -> Person:
        active: Optional[bool] = self._people.toggle_active(person_id)
        if active is None:
            raise NotFoundError(f"Person {person_id} not found")
        return self.get(person_id)

    def delete(self, person_id: int) -> None:
        if not self._people.delete_by_id(person_id):
            raise NotFoundError(f"Person {person_id} not found")

    @staticmethod
    def scan_url(base_url: str, person: Person) -> str:
        return f"{base_url.rstrip('/')}/scan/{person.token}"
