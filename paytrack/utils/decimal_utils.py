"""Helpers for Decimal normalization."""

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

ONE_DECIMAL = Decimal("0.1")
TWO_DECIMALS = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or user input.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: Decimal, exponent: Decimal = ONE_DECIMAL) -> Decimal:
    """Quantize a value with halves rounded away from zero.

    Args:
        value: Value to round.
        exponent: Quantum, e.g. ``Decimal("0.1")`` for one decimal place.

    Returns:
        Decimal: Rounded value.
    """
    return coerce_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def round_to_int(value: Decimal) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    shifted = coerce_decimal(value) + Decimal("0.5")
    return int(shifted.to_integral_value(rounding=ROUND_FLOOR))


__all__ = [
    "ONE_DECIMAL",
    "TWO_DECIMALS",
    "coerce_decimal",
    "round_half_up",
    "round_to_int",
]
