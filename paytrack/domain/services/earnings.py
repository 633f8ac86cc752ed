"""Aggregation of timesheet entries into earnings figures."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from paytrack.domain.models import DaySummary, EarningsSummary, WorkEntry
from paytrack.domain.services.periods import in_window


def filter_work_entries(
    entries: Iterable[WorkEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[WorkEntry]:
    """Keep entries whose work date is inside the inclusive window."""
    return [
        entry
        for entry in entries
        if in_window(entry.work_date, start_date, end_date)
    ]


def compute_earnings_summary(
    entries: Iterable[WorkEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> EarningsSummary:
    """Compute hour and earning totals split by paid status.

    Every entry is priced with its own hourly rate.

    Args:
        entries: Work entries to aggregate.
        start_date: Optional inclusive lower bound on the work date.
        end_date: Optional inclusive upper bound on the work date.

    Returns:
        EarningsSummary: Totals for the whole set and each partition.
    """
    paid_hours = Decimal("0")
    paid_earnings = Decimal("0")
    unpaid_hours = Decimal("0")
    unpaid_earnings = Decimal("0")

    for entry in filter_work_entries(entries, start_date, end_date):
        if entry.is_paid:
            paid_hours += entry.hours_worked
            paid_earnings += entry.earnings
        else:
            unpaid_hours += entry.hours_worked
            unpaid_earnings += entry.earnings

    return EarningsSummary(
        total_hours=paid_hours + unpaid_hours,
        total_earnings=paid_earnings + unpaid_earnings,
        paid_hours=paid_hours,
        paid_earnings=paid_earnings,
        unpaid_hours=unpaid_hours,
        unpaid_earnings=unpaid_earnings,
    )


def summarize_days(entries: Iterable[WorkEntry]) -> list[DaySummary]:
    """Group entries per work date for calendar display.

    Args:
        entries: Work entries to group.

    Returns:
        list[DaySummary]: One summary per date, oldest first.
    """
    grouped: dict[date, list[WorkEntry]] = {}
    for entry in entries:
        grouped.setdefault(entry.work_date, []).append(entry)

    summaries = []
    for work_date in sorted(grouped):
        day_entries = grouped[work_date]
        summaries.append(
            DaySummary(
                work_date=work_date,
                hours=sum(
                    (entry.hours_worked for entry in day_entries),
                    Decimal("0"),
                ),
                earnings=sum(
                    (entry.earnings for entry in day_entries),
                    Decimal("0"),
                ),
                entry_ids=tuple(
                    entry.entry_id
                    for entry in day_entries
                    if entry.entry_id is not None
                ),
                unpaid_entry_ids=tuple(
                    entry.entry_id
                    for entry in day_entries
                    if entry.entry_id is not None and not entry.is_paid
                ),
            )
        )
    return summaries


def unique_job_names(entries: Iterable[WorkEntry]) -> list[str]:
    """Return the sorted distinct job names."""
    return sorted({entry.job_name for entry in entries})


__all__ = [
    "filter_work_entries",
    "compute_earnings_summary",
    "summarize_days",
    "unique_job_names",
]
