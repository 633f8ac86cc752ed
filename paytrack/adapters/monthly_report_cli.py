"""CLI adapter printing one month's earnings and spending."""

from datetime import date
import os

from paytrack.application.use_cases.get_dashboard_summary import (
    DashboardView,
    GetDashboardSummaryUseCase,
)
from paytrack.infrastructure.container import (
    build_accounts_repository,
    build_database_adapter,
    build_expenses_repository,
    build_profiles_repository,
    build_timesheets_repository,
)
from paytrack.infrastructure.logging.logger import get_app_logger
from paytrack.infrastructure.settings import FinanceSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def format_report(view: DashboardView, currency_symbol: str) -> list[str]:
    """Render the dashboard view as plain text lines."""
    summary = view.summary
    earnings = view.earnings
    lines = [
        f"Monthly report ({view.period_start} to {view.period_end})",
        f"Net worth: {currency_symbol}{summary.total_balance:,.2f}",
        f"Hours worked: {earnings.total_hours:.1f}h "
        f"({earnings.unpaid_hours:.1f}h unpaid)",
        f"Earnings: {currency_symbol}{summary.monthly_earnings:,.2f} "
        f"(pending {currency_symbol}{earnings.unpaid_earnings:,.2f})",
        f"Expenses: {currency_symbol}{summary.monthly_expenses:,.2f}",
        f"Net savings: {currency_symbol}{summary.net_savings:,.2f} "
        f"({summary.savings_rate}%)",
    ]
    for category, amount in view.breakdown.totals.items():
        lines.append(f"  {category.label}: {currency_symbol}{amount:,.2f}")
    return lines


def main() -> None:
    """Compute and print the report for REPORT_MONTH or the current month."""
    logger = get_app_logger()
    settings = FinanceSettings.from_env()
    reference = _parse_date(os.getenv("REPORT_MONTH"), logger) or date.today()

    db_adapter = build_database_adapter()
    use_case = GetDashboardSummaryUseCase(
        accounts_repository=build_accounts_repository(db_adapter),
        timesheets_repository=build_timesheets_repository(db_adapter),
        expenses_repository=build_expenses_repository(db_adapter),
        profiles_repository=build_profiles_repository(db_adapter),
        logger=logger,
        recent_limit=settings.recent_expenses_limit,
    )
    view = use_case.execute(reference)

    for line in format_report(view, settings.currency_symbol):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
