from __future__ import annotations

from typing import Optional, Union

from ..core.exceptions import ValidationError

Number = Union[int, float]


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def empty_to_none(value: Optional[str]) -> Optional[str]:
    return value if value else None


def parse_optional_int(value: Optional[str]) -> Optional[int]:
    """Integer form field; leading integer part of decimals, None if blank or not numeric."""
    if not value:
        return None
    try:
        return int(float(value.strip()))
    except (ValueError, OverflowError):
        return None


def parse_optional_float(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def compact_number(value: Number) -> Number:
    """2.0 -> 2, 1.5 -> 1.5 (keeps JSON payloads free of spurious decimals)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def number_to_field(value: Optional[Number]) -> str:
    """Render an optional number back into a form field string."""
    if value is None:
        return ""
    return str(compact_number(value))
