"""Paid/unpaid transitions for work entries."""

from dataclasses import replace
from datetime import date

from paytrack.domain.models import WorkEntry


def mark_paid(entry: WorkEntry, today: date) -> WorkEntry:
    """Return the entry marked paid on ``today``."""
    return replace(entry, is_paid=True, paid_date=today)


def mark_unpaid(entry: WorkEntry) -> WorkEntry:
    """Return the entry marked unpaid with its paid date cleared."""
    return replace(entry, is_paid=False, paid_date=None)


def toggle_paid(entry: WorkEntry, today: date) -> WorkEntry:
    """Flip the paid status of an entry."""
    if entry.is_paid:
        return mark_unpaid(entry)
    return mark_paid(entry, today)


def paid_status_patch(is_paid: bool, today: date) -> dict[str, object]:
    """Return the column values persisted for a paid status change.

    Args:
        is_paid: Target paid flag.
        today: Date recorded when the entry becomes paid.

    Returns:
        dict[str, object]: ``is_paid`` and ``paid_date`` values.
    """
    return {
        "is_paid": is_paid,
        "paid_date": today if is_paid else None,
    }


__all__ = ["mark_paid", "mark_unpaid", "toggle_paid", "paid_status_patch"]
