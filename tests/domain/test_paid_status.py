"""Tests for paid status transitions."""

from datetime import date
from decimal import Decimal

import pytest

from paytrack.domain.models import WorkEntry
from paytrack.domain.policies.paid_status import (
    mark_paid,
    mark_unpaid,
    paid_status_patch,
    toggle_paid,
)
from paytrack.domain.services.earnings import compute_earnings_summary


def _entry(paid=False):
    return WorkEntry(
        entry_id="a",
        job_name="Cafe",
        hours_worked=Decimal("5"),
        hourly_rate=Decimal("15"),
        work_date=date(2024, 5, 1),
        day_of_week="Wednesday",
        is_paid=paid,
        paid_date=date(2024, 5, 2) if paid else None,
    )


def test_mark_paid_sets_date_and_unpaid_clears_it():
    """Marking paid should record the day; unpaid should clear it."""
    paid = mark_paid(_entry(), date(2024, 5, 10))

    assert paid.is_paid is True
    assert paid.paid_date == date(2024, 5, 10)

    unpaid = mark_unpaid(paid)

    assert unpaid.is_paid is False
    assert unpaid.paid_date is None


def test_toggle_twice_restores_summary_with_fresh_date():
    """Toggling paid twice should restore figures and refresh the date."""
    original = _entry(paid=True)
    before = compute_earnings_summary([original])

    unpaid = toggle_paid(original, date(2024, 6, 1))
    toggled = toggle_paid(unpaid, date(2024, 6, 3))

    assert unpaid.is_paid is False

    assert compute_earnings_summary([toggled]) == before
    assert toggled.paid_date == date(2024, 6, 3)


def test_paid_status_patch_values():
    """The persisted patch should keep flag and date consistent."""
    today = date(2024, 5, 5)

    assert paid_status_patch(True, today) == {
        "is_paid": True,
        "paid_date": today,
    }
    assert paid_status_patch(False, today) == {
        "is_paid": False,
        "paid_date": None,
    }


def test_work_entry_rejects_inconsistent_paid_date():
    """A paid entry must carry a paid date and an unpaid one must not."""
    with pytest.raises(ValueError):
        WorkEntry(
            entry_id=None,
            job_name="Cafe",
            hours_worked=Decimal("1"),
            hourly_rate=Decimal("1"),
            work_date=date(2024, 5, 1),
            day_of_week="Wednesday",
            is_paid=True,
        )
