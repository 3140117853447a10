from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_valid_date


def require_non_empty(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_text(value, field_name: str) -> str:
    """Optional profile text: None becomes empty, anything else must be a string."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip()


def require_date(value, field_name: str = "Date") -> str:
    if not is_valid_date(value):
        raise ValidationError(f"{field_name} must use YYYY-MM-DD format")
    return value


def require_bool(value, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_identifier(value, field_name: str) -> str:
    """Non-empty key used verbatim: surrounding whitespace is rejected, not stripped."""
    require_non_empty(value, field_name)
    if value != value.strip():
        raise ValidationError(f"{field_name} must not start or end with whitespace")
    return value
