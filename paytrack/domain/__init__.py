"""Domain package for business rules and core models."""

from .constants import AccountType, DebtType, ExpenseCategory, PaymentMethod
from .exceptions import (
    GatewayError,
    InvalidTimeRangeError,
    RecordNotFoundError,
    ValidationError,
)
from .models import (
    BankAccount,
    CashAccount,
    DashboardSummary,
    DaySummary,
    Debt,
    EarningsSummary,
    ExpenseBreakdown,
    ExpenseDayGroup,
    ExpenseEntry,
    Profile,
    WorkEntry,
)
from .policies import mark_paid, mark_unpaid, paid_status_patch, toggle_paid
from .services import (
    compute_earnings_summary,
    compute_expense_breakdown,
    compute_hours,
    compute_net_savings,
    compute_net_worth,
    compute_savings_rate,
    group_expenses_by_day,
)

__all__ = [
    "AccountType",
    "DebtType",
    "ExpenseCategory",
    "PaymentMethod",
    "GatewayError",
    "InvalidTimeRangeError",
    "RecordNotFoundError",
    "ValidationError",
    "BankAccount",
    "CashAccount",
    "DashboardSummary",
    "DaySummary",
    "Debt",
    "EarningsSummary",
    "ExpenseBreakdown",
    "ExpenseDayGroup",
    "ExpenseEntry",
    "Profile",
    "WorkEntry",
    "mark_paid",
    "mark_unpaid",
    "paid_status_patch",
    "toggle_paid",
    "compute_earnings_summary",
    "compute_expense_breakdown",
    "compute_hours",
    "compute_net_savings",
    "compute_net_worth",
    "compute_savings_rate",
    "group_expenses_by_day",
]
