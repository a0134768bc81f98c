from __future__ import annotations

import hmac

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError
from ..settings import AdminCredentials


class AdminAuthService:
    """Use case: authenticate the single administrator account."""

    def __init__(self, credentials: AdminCredentials):
        self._username = credentials.username
        # An empty configured password disables login entirely.
        self._password_hash = generate_password_hash(credentials.password) if credentials.password else None

    def authenticate(self, username: str, password: str) -> str:
        user_ok = hmac.compare_digest((username or "").encode(), self._username.encode())
        if not self._password_hash or not password:
            raise AuthenticationError("Invalid username or password")

        pw_ok = check_password_hash(self._password_hash, password)
        if not (user_ok and pw_ok):
            raise AuthenticationError("Invalid username or password")
        return self._username
