"""Domain models for user-owned finance records."""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal

from paytrack.domain.constants import (
    AccountType,
    DebtType,
    ExpenseCategory,
    PaymentMethod,
)


@dataclass(frozen=True)
class WorkEntry:
    """One logged timesheet record.

    Attributes:
        entry_id: Database identifier, None until inserted.
        job_name: Name of the job worked.
        hours_worked: Hours worked with one-decimal precision.
        hourly_rate: Pay per hour for this entry.
        work_date: Calendar date of the shift.
        day_of_week: Weekday label derived from work_date.
        time_in: Optional clock-in time.
        time_out: Optional clock-out time.
        is_paid: Whether compensation was received.
        paid_date: Date the entry was marked paid.
    """

    entry_id: str | None
    job_name: str
    hours_worked: Decimal
    hourly_rate: Decimal
    work_date: date
    day_of_week: str
    time_in: time | None = None
    time_out: time | None = None
    is_paid: bool = False
    paid_date: date | None = None

    def __post_init__(self) -> None:
        if self.is_paid != (self.paid_date is not None):
            raise ValueError(
                "paid_date must be set if and only if is_paid is true"
            )

    @property
    def earnings(self) -> Decimal:
        """Return hours worked times the hourly rate."""
        return self.hours_worked * self.hourly_rate

    @property
    def is_time_based(self) -> bool:
        """Return True when both clock times are recorded."""
        return self.time_in is not None and self.time_out is not None


@dataclass(frozen=True)
class ExpenseEntry:
    """A single expense."""

    expense_id: str | None
    name: str
    category: ExpenseCategory
    amount: Decimal
    spent_at: datetime
    payment_method: PaymentMethod
    notes: str | None = None

    @property
    def spent_on(self) -> date:
        """Return the calendar date of the expense."""
        return self.spent_at.date()


@dataclass(frozen=True)
class BankAccount:
    """Bank account with its current balance."""

    account_id: str | None
    bank_name: str
    account_type: AccountType
    current_balance: Decimal


@dataclass(frozen=True)
class CashAccount:
    """Cash on hand; one per user."""

    account_id: str | None
    current_balance: Decimal


@dataclass(frozen=True)
class Debt:
    """Outstanding debt."""

    debt_id: str | None
    debt_name: str
    debt_type: DebtType
    current_amount: Decimal


@dataclass(frozen=True)
class Profile:
    """Presentation preferences for a user."""

    name: str
    currency_symbol: str | None = None
    theme_preference: str | None = None


__all__ = [
    "WorkEntry",
    "ExpenseEntry",
    "BankAccount",
    "CashAccount",
    "Debt",
    "Profile",
]
