"""Domain models package."""

from .entries import (
    BankAccount,
    CashAccount,
    Debt,
    ExpenseEntry,
    Profile,
    WorkEntry,
)
from .finance import (
    DashboardSummary,
    DaySummary,
    EarningsSummary,
    ExpenseBreakdown,
    ExpenseDayGroup,
)

__all__ = [
    "BankAccount",
    "CashAccount",
    "Debt",
    "ExpenseEntry",
    "Profile",
    "WorkEntry",
    "DashboardSummary",
    "DaySummary",
    "EarningsSummary",
    "ExpenseBreakdown",
    "ExpenseDayGroup",
]
