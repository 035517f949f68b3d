from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_present(value, field_name: str):
    if value is None:
        raise ValidationError(f"{field_name} is required")
    return value


def require_positive(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def parse_bool(value, field_name: str) -> bool:
    """Accept JSON booleans and the usual form encodings."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on", "present"}:
        return True
    if text in {"", "0", "false", "no", "off", "absent"}:
        return False
    raise ValidationError(f"{field_name} must be true or false")
