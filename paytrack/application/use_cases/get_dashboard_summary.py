"""Use case to compute the dashboard and monthly statistics."""

from dataclasses import dataclass, field
from datetime import date

from paytrack.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from paytrack.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from paytrack.application.ports.profiles_repository import (
    ProfilesRepositoryPort,
)
from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.domain.constants import DEFAULT_RECENT_EXPENSES_LIMIT
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import (
    DashboardSummary,
    EarningsSummary,
    ExpenseBreakdown,
    ExpenseEntry,
)
from paytrack.domain.services.balances import (
    compute_net_savings,
    compute_net_worth,
    compute_savings_rate,
)
from paytrack.domain.services.earnings import compute_earnings_summary
from paytrack.domain.services.expenses import (
    compute_expense_breakdown,
    latest_expenses,
)
from paytrack.domain.services.periods import month_window
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardView:
    """Dashboard figures for one calendar month."""

    summary: DashboardSummary
    earnings: EarningsSummary
    breakdown: ExpenseBreakdown
    recent_expenses: list[ExpenseEntry] = field(default_factory=list)
    display_name: str | None = None
    period_start: date | None = None
    period_end: date | None = None


class GetDashboardSummaryUseCase:
    """Combine balances, monthly earnings and monthly expenses."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        timesheets_repository: TimesheetsRepositoryPort,
        expenses_repository: ExpensesRepositoryPort,
        profiles_repository: ProfilesRepositoryPort | None = None,
        logger=None,
        recent_limit: int = DEFAULT_RECENT_EXPENSES_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing bank and cash balances.
            timesheets_repository: Port providing work entries.
            expenses_repository: Port providing expenses.
            profiles_repository: Optional port providing the display name.
            logger: Optional logger compatible with logging.Logger-like API.
            recent_limit: Number of recent expenses to return.
        """
        self._accounts_repository = accounts_repository
        self._timesheets_repository = timesheets_repository
        self._expenses_repository = expenses_repository
        self._profiles_repository = profiles_repository
        self._logger = logger or get_app_logger()
        self._recent_limit = recent_limit

    def execute(self, today: date | None = None) -> DashboardView:
        """Return the dashboard for the month containing ``today``.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            DashboardView: Net worth, monthly totals and recent activity.
        """
        reference = today or date.today()
        start_date, end_date = month_window(reference)
        try:
            bank_accounts = self._accounts_repository.fetch_bank_accounts()
            cash_account = self._accounts_repository.fetch_cash_account()
            entries = self._timesheets_repository.fetch_entries(
                start_date,
                end_date,
            )
            expenses = self._expenses_repository.fetch_expenses(
                start_date,
                end_date,
            )
            recent = self._expenses_repository.fetch_expenses(
                limit=self._recent_limit,
            )
            profile = (
                self._profiles_repository.fetch_profile()
                if self._profiles_repository is not None
                else None
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to load dashboard: {exc}")
            raise

        earnings = compute_earnings_summary(entries, start_date, end_date)
        breakdown = compute_expense_breakdown(expenses, start_date, end_date)
        net_savings = compute_net_savings(
            earnings.total_earnings,
            breakdown.grand_total,
        )
        summary = DashboardSummary(
            total_balance=compute_net_worth(bank_accounts, cash_account),
            monthly_earnings=earnings.total_earnings,
            monthly_expenses=breakdown.grand_total,
            net_savings=net_savings,
            savings_rate=compute_savings_rate(
                net_savings,
                earnings.total_earnings,
            ),
        )
        self._logger.info(
            f"Dashboard computed for {start_date:%Y-%m}: "
            f"earnings={summary.monthly_earnings}, "
            f"expenses={summary.monthly_expenses}"
        )
        return DashboardView(
            summary=summary,
            earnings=earnings,
            breakdown=breakdown,
            recent_expenses=latest_expenses(recent, self._recent_limit),
            display_name=profile.name if profile is not None else None,
            period_start=start_date,
            period_end=end_date,
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardView"]
