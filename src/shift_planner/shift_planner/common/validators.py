from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_id(value: Optional[str]) -> Optional[str]:
    """Normalize an optional identifier: blank means absent."""

    if value is None:
        return None
    v = str(value).strip()
    return v or None


def require_non_negative(value: int, field_name: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")
    if n < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return n
