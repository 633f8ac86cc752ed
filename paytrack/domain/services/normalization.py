"""Domain normalization helpers."""

from datetime import date

from paytrack.domain.constants import WEEKDAY_NAMES


def normalize_text(value: str | None) -> str | None:
    """Strip free-text input, mapping blank values to None.

    Args:
        value: Raw text from a form or a repository row.

    Returns:
        str | None: Stripped text, or None when empty.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


def day_of_week_label(work_date: date) -> str:
    """Return the English weekday name for a date.

    Args:
        work_date: Calendar date of a work entry.

    Returns:
        str: Weekday name such as ``"Monday"``.
    """
    return WEEKDAY_NAMES[work_date.weekday()]


__all__ = ["normalize_text", "day_of_week_label"]
