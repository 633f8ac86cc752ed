"""Tests for timesheet aggregation."""

from datetime import date
from decimal import Decimal

from paytrack.domain.models import EarningsSummary, WorkEntry
from paytrack.domain.services.earnings import (
    compute_earnings_summary,
    filter_work_entries,
    summarize_days,
    unique_job_names,
)


def _entry(
    entry_id,
    hours,
    rate,
    work_date,
    paid=False,
    job_name="Cafe",
):
    return WorkEntry(
        entry_id=entry_id,
        job_name=job_name,
        hours_worked=Decimal(str(hours)),
        hourly_rate=Decimal(str(rate)),
        work_date=work_date,
        day_of_week=work_date.strftime("%A"),
        is_paid=paid,
        paid_date=work_date if paid else None,
    )


def _may_entries():
    return [
        _entry("a", 5, 15, date(2024, 5, 1)),
        _entry("b", 3, 20, date(2024, 5, 3), paid=True, job_name="Library"),
    ]


def test_may_scenario_totals_and_partitions():
    """Each entry should be priced with its own rate and split by status."""
    summary = compute_earnings_summary(
        _may_entries(),
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert summary.total_hours == Decimal("8")
    assert summary.total_earnings == Decimal("135")
    assert summary.paid_hours == Decimal("3")
    assert summary.paid_earnings == Decimal("60")
    assert summary.unpaid_hours == Decimal("5")
    assert summary.unpaid_earnings == Decimal("75")


def test_partitions_add_up_to_totals():
    """Paid plus unpaid should always equal the totals."""
    entries = [
        _entry("a", "7.5", "18.25", date(2024, 6, 1), paid=True),
        _entry("b", "2.3", "11", date(2024, 6, 2)),
        _entry("c", "0", "30", date(2024, 6, 3), paid=True),
        _entry("d", "4.1", "0", date(2024, 6, 4)),
    ]

    summary = compute_earnings_summary(entries)

    assert summary.paid_hours + summary.unpaid_hours == summary.total_hours
    assert (
        summary.paid_earnings + summary.unpaid_earnings
        == summary.total_earnings
    )


def test_window_bounds_are_inclusive():
    """Entries on the window edges should be counted."""
    entries = [
        _entry("a", 1, 10, date(2024, 4, 30)),
        _entry("b", 2, 10, date(2024, 5, 1)),
        _entry("c", 3, 10, date(2024, 5, 31)),
        _entry("d", 4, 10, date(2024, 6, 1)),
    ]

    summary = compute_earnings_summary(
        entries,
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert summary.total_hours == Decimal("5")
    assert [
        entry.entry_id
        for entry in filter_work_entries(entries, date(2024, 5, 1))
    ] == ["b", "c", "d"]


def test_empty_collection_yields_zero_summary():
    """No entries should produce an all-zero summary, not an error."""
    assert compute_earnings_summary([]) == EarningsSummary()


def test_summarize_days_groups_by_date():
    """Days should be sorted and track unpaid ids for bulk actions."""
    entries = [
        _entry("c", 2, 10, date(2024, 5, 3)),
        _entry("a", 5, 15, date(2024, 5, 1)),
        _entry("b", 1, 20, date(2024, 5, 1), paid=True),
    ]

    days = summarize_days(entries)

    assert [day.work_date for day in days] == [
        date(2024, 5, 1),
        date(2024, 5, 3),
    ]
    first = days[0]
    assert first.hours == Decimal("6")
    assert first.earnings == Decimal("95")
    assert first.entry_ids == ("a", "b")
    assert first.unpaid_entry_ids == ("a",)
    assert first.any_paid is True
    assert first.all_paid is False


def test_unique_job_names_sorted():
    """Job names should be distinct and sorted."""
    entries = _may_entries() + [_entry("c", 1, 1, date(2024, 5, 4))]

    assert unique_job_names(entries) == ["Cafe", "Library"]
