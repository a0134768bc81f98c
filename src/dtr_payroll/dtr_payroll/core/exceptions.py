class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a token or person id does not resolve."""


class StorageError(DomainError):
    """Raised when a read/modify/write against the store failed or timed out.

    The surrounding transaction is rolled back before this propagates.
    """


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
