"""Aggregation of expenses by category and by day."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from paytrack.domain.constants import ExpenseCategory
from paytrack.domain.models import (
    ExpenseBreakdown,
    ExpenseDayGroup,
    ExpenseEntry,
)
from paytrack.domain.services.periods import in_window


def filter_expenses(
    entries: Iterable[ExpenseEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[ExpenseEntry]:
    """Keep expenses whose date is inside the inclusive window."""
    return [
        entry
        for entry in entries
        if in_window(entry.spent_on, start_date, end_date)
    ]


def compute_expense_breakdown(
    entries: Iterable[ExpenseEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> ExpenseBreakdown:
    """Compute per-category totals and the grand total.

    Categories without any matching expense are left out of the mapping.

    Args:
        entries: Expenses to aggregate.
        start_date: Optional inclusive lower bound on the expense date.
        end_date: Optional inclusive upper bound on the expense date.

    Returns:
        ExpenseBreakdown: Totals keyed by category, in enumeration order.
    """
    filtered = filter_expenses(entries, start_date, end_date)
    sums: dict[ExpenseCategory, Decimal] = {}
    grand_total = Decimal("0")
    for entry in filtered:
        sums[entry.category] = sums.get(entry.category, Decimal("0")) + (
            entry.amount
        )
        grand_total += entry.amount

    totals = {
        category: sums[category]
        for category in ExpenseCategory
        if category in sums
    }
    return ExpenseBreakdown(totals=totals, grand_total=grand_total)


def group_expenses_by_day(
    entries: Iterable[ExpenseEntry],
) -> list[ExpenseDayGroup]:
    """Group expenses by calendar date, most recent first.

    Args:
        entries: Expenses to group.

    Returns:
        list[ExpenseDayGroup]: Groups newest date first; entries inside a
        group are ordered newest timestamp first.
    """
    grouped: dict[date, list[ExpenseEntry]] = {}
    for entry in sorted(entries, key=lambda item: item.spent_at, reverse=True):
        grouped.setdefault(entry.spent_on, []).append(entry)
    return [
        ExpenseDayGroup(day=day, expenses=grouped[day])
        for day in sorted(grouped, reverse=True)
    ]


def latest_expenses(
    entries: Iterable[ExpenseEntry],
    limit: int = 5,
) -> list[ExpenseEntry]:
    """Return the ``limit`` most recent expenses."""
    ordered = sorted(entries, key=lambda item: item.spent_at, reverse=True)
    return ordered[: max(limit, 0)]


__all__ = [
    "filter_expenses",
    "compute_expense_breakdown",
    "group_expenses_by_day",
    "latest_expenses",
]
