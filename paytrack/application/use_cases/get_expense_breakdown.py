"""Use case to aggregate expenses for a period."""

from dataclasses import dataclass, field
from datetime import date

from paytrack.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import (
    ExpenseBreakdown,
    ExpenseDayGroup,
    ExpenseEntry,
)
from paytrack.domain.services.expenses import (
    compute_expense_breakdown,
    filter_expenses,
    group_expenses_by_day,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExpensesView:
    """Expenses with category totals and day groups."""

    expenses: list[ExpenseEntry] = field(default_factory=list)
    breakdown: ExpenseBreakdown = field(default_factory=ExpenseBreakdown)
    day_groups: list[ExpenseDayGroup] = field(default_factory=list)


class GetExpenseBreakdownUseCase:
    """Fetch expenses and aggregate them by category and by day."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            expenses_repository: Port providing the user's expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ExpensesView:
        """Return category totals and day groups for the window.

        Args:
            start_date: Optional inclusive lower bound on the expense date.
            end_date: Optional inclusive upper bound on the expense date.

        Returns:
            ExpensesView: Aggregated expenses.
        """
        try:
            rows = self._expenses_repository.fetch_expenses(
                start_date,
                end_date,
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to load expenses: {exc}")
            raise

        expenses = filter_expenses(rows, start_date, end_date)
        breakdown = compute_expense_breakdown(expenses)
        self._logger.info(
            f"Expenses aggregated: count={len(expenses)}, "
            f"total={breakdown.grand_total}"
        )
        return ExpensesView(
            expenses=expenses,
            breakdown=breakdown,
            day_groups=group_expenses_by_day(expenses),
        )


__all__ = ["GetExpenseBreakdownUseCase", "ExpensesView"]
