"""Application use cases package."""

from .get_dashboard_summary import DashboardView, GetDashboardSummaryUseCase
from .get_earnings_summary import GetEarningsSummaryUseCase, TimesheetView
from .get_expense_breakdown import ExpensesView, GetExpenseBreakdownUseCase
from .manage_accounts import AccountsView, ManageAccountsUseCase
from .manage_debts import DebtsView, ManageDebtsUseCase
from .manage_expenses import (
    DeleteExpenseUseCase,
    ExpenseForm,
    SaveExpenseUseCase,
)
from .manage_work_entries import (
    DeleteWorkEntryUseCase,
    SaveWorkEntryUseCase,
    WorkEntryForm,
)
from .toggle_paid_status import TogglePaidStatusUseCase

__all__ = [
    "DashboardView",
    "GetDashboardSummaryUseCase",
    "GetEarningsSummaryUseCase",
    "TimesheetView",
    "ExpensesView",
    "GetExpenseBreakdownUseCase",
    "AccountsView",
    "ManageAccountsUseCase",
    "DebtsView",
    "ManageDebtsUseCase",
    "DeleteExpenseUseCase",
    "ExpenseForm",
    "SaveExpenseUseCase",
    "DeleteWorkEntryUseCase",
    "SaveWorkEntryUseCase",
    "WorkEntryForm",
    "TogglePaidStatusUseCase",
]
