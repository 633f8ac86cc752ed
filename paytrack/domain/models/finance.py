"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from paytrack.domain.constants import ExpenseCategory
from paytrack.domain.models.entries import ExpenseEntry


@dataclass(frozen=True)
class EarningsSummary:
    """Hours and earnings totals with their paid/unpaid partitions.

    Attributes:
        total_hours: Sum of hours over all entries.
        total_earnings: Sum of per-entry hours times rate.
        paid_hours: Hours of entries marked paid.
        paid_earnings: Earnings of entries marked paid.
        unpaid_hours: Hours of entries not yet paid.
        unpaid_earnings: Earnings of entries not yet paid.
    """

    total_hours: Decimal = Decimal("0")
    total_earnings: Decimal = Decimal("0")
    paid_hours: Decimal = Decimal("0")
    paid_earnings: Decimal = Decimal("0")
    unpaid_hours: Decimal = Decimal("0")
    unpaid_earnings: Decimal = Decimal("0")


@dataclass(frozen=True)
class DaySummary:
    """Work totals for one calendar day."""

    work_date: date
    hours: Decimal
    earnings: Decimal
    entry_ids: tuple[str, ...]
    unpaid_entry_ids: tuple[str, ...]

    @property
    def all_paid(self) -> bool:
        """Return True when every entry of the day is paid."""
        return bool(self.entry_ids) and not self.unpaid_entry_ids

    @property
    def any_paid(self) -> bool:
        """Return True when at least one entry of the day is paid."""
        return len(self.unpaid_entry_ids) < len(self.entry_ids)


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expense totals per category plus the grand total."""

    totals: dict[ExpenseCategory, Decimal] = field(default_factory=dict)
    grand_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExpenseDayGroup:
    """Expenses sharing one calendar date, newest first."""

    day: date
    expenses: list[ExpenseEntry]

    @property
    def total(self) -> Decimal:
        """Return the sum of the group's amounts."""
        return sum(
            (expense.amount for expense in self.expenses),
            Decimal("0"),
        )


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures for the dashboard."""

    total_balance: Decimal
    monthly_earnings: Decimal
    monthly_expenses: Decimal
    net_savings: Decimal
    savings_rate: int


__all__ = [
    "EarningsSummary",
    "DaySummary",
    "ExpenseBreakdown",
    "ExpenseDayGroup",
    "DashboardSummary",
]
