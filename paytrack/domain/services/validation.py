"""Boundary validation for user-submitted values."""

from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from paytrack.domain.exceptions import ValidationError
from paytrack.domain.services.normalization import normalize_text

EnumT = TypeVar("EnumT", bound=Enum)


def require_text(value: str | None, field: str) -> str:
    """Return stripped text or reject an empty value."""
    cleaned = normalize_text(value)
    if cleaned is None:
        raise ValidationError(f"{field} is required", field=field)
    return cleaned


def parse_decimal(
    value,
    field: str,
    *,
    minimum: Decimal | None = None,
    strictly_positive: bool = False,
) -> Decimal:
    """Parse a numeric form value.

    Args:
        value: Raw value (str, int, float or Decimal).
        field: Field name used in error messages.
        minimum: Optional inclusive lower bound.
        strictly_positive: Reject zero and negative values.

    Returns:
        Decimal: Parsed value.

    Raises:
        ValidationError: If the value is missing, not a finite number or out
            of bounds.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required", field=field)
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValidationError(
            f"{field} must be a number",
            field=field,
        ) from exc
    if not parsed.is_finite():
        raise ValidationError(f"{field} must be a number", field=field)
    if strictly_positive and parsed <= 0:
        raise ValidationError(f"{field} must be greater than 0", field=field)
    if minimum is not None and parsed < minimum:
        raise ValidationError(
            f"{field} must be at least {minimum}",
            field=field,
        )
    return parsed


def parse_date(value: date | str, field: str) -> date:
    """Parse an ISO date value."""
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise ValidationError(
            f"{field} must be a date (YYYY-MM-DD)",
            field=field,
        ) from exc


def parse_choice(enum_cls: type[EnumT], value, field: str) -> EnumT:
    """Validate a value against a closed enumeration.

    Args:
        enum_cls: Enumeration to validate against.
        value: Enum member or its raw string value.
        field: Field name used in error messages.

    Returns:
        Enum member matching the value.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            f"{field} must be one of: {allowed}",
            field=field,
        ) from exc


__all__ = [
    "require_text",
    "parse_decimal",
    "parse_date",
    "parse_choice",
]
