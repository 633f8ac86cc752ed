"""Use case to compute timesheet earnings for a period."""

from dataclasses import dataclass, field
from datetime import date

from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import DaySummary, EarningsSummary, WorkEntry
from paytrack.domain.services.earnings import (
    compute_earnings_summary,
    filter_work_entries,
    summarize_days,
    unique_job_names,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TimesheetView:
    """Work entries with their aggregates for UI rendering."""

    entries: list[WorkEntry] = field(default_factory=list)
    summary: EarningsSummary = field(default_factory=EarningsSummary)
    days: list[DaySummary] = field(default_factory=list)
    job_names: list[str] = field(default_factory=list)


def build_timesheet_view(
    entries: list[WorkEntry],
    start_date: date | None = None,
    end_date: date | None = None,
) -> TimesheetView:
    """Aggregate freshly fetched entries into a view.

    Args:
        entries: Entries returned by the repository.
        start_date: Optional inclusive lower bound on the work date.
        end_date: Optional inclusive upper bound on the work date.

    Returns:
        TimesheetView: Entries, summary, per-day totals and job names.
    """
    windowed = filter_work_entries(entries, start_date, end_date)
    return TimesheetView(
        entries=windowed,
        summary=compute_earnings_summary(windowed),
        days=summarize_days(windowed),
        job_names=unique_job_names(entries),
    )


class GetEarningsSummaryUseCase:
    """Fetch work entries and aggregate hours and earnings."""

    def __init__(
        self,
        timesheets_repository: TimesheetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            timesheets_repository: Port providing the user's work entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._timesheets_repository = timesheets_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TimesheetView:
        """Return the timesheet view for the window.

        Args:
            start_date: Optional inclusive lower bound on the work date.
            end_date: Optional inclusive upper bound on the work date.

        Returns:
            TimesheetView: Aggregated entries for the window.
        """
        try:
            entries = self._timesheets_repository.fetch_entries(
                start_date,
                end_date,
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to load timesheets: {exc}")
            raise

        view = build_timesheet_view(entries, start_date, end_date)
        self._logger.info(
            f"Earnings computed for {len(view.entries)} entries: "
            f"hours={view.summary.total_hours}, "
            f"earnings={view.summary.total_earnings}"
        )
        return view


__all__ = [
    "GetEarningsSummaryUseCase",
    "TimesheetView",
    "build_timesheet_view",
]
