from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_rate(value, field_name: str = "Rate") -> Decimal:
    """Parse an hourly rate into a non-negative Decimal."""
    try:
        rate = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not rate.is_finite() or rate < 0:
        raise ValidationError(f"{field_name} must be a non-negative number")
    return rate


def require_int(value, field_name: str) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
