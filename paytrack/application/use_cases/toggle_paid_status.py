"""Use case to mark work entries paid or unpaid."""

from collections.abc import Callable, Sequence
from datetime import date

from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.application.use_cases.get_earnings_summary import (
    TimesheetView,
    build_timesheet_view,
)
from paytrack.domain.exceptions import GatewayError, ValidationError
from paytrack.domain.policies.paid_status import paid_status_patch
from paytrack.infrastructure.logging.logger import get_app_logger


class TogglePaidStatusUseCase:
    """Change the paid status of one entry or a batch of entries.

    The batch is written in a single repository call. The view is rebuilt
    from a fresh fetch only after that call succeeds.
    """

    def __init__(
        self,
        timesheets_repository: TimesheetsRepositoryPort,
        logger=None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            timesheets_repository: Port storing the user's work entries.
            logger: Optional logger compatible with logging.Logger-like API.
            today: Clock returning the date recorded as paid date.
        """
        self._timesheets_repository = timesheets_repository
        self._logger = logger or get_app_logger()
        self._today = today

    def execute(
        self,
        entry_ids: Sequence[str],
        is_paid: bool,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TimesheetView:
        """Apply the paid status to every id and return the refreshed view.

        Args:
            entry_ids: Identifiers of the entries to update.
            is_paid: Target paid flag.
            start_date: Optional lower bound of the refreshed view.
            end_date: Optional upper bound of the refreshed view.

        Returns:
            TimesheetView: View recomputed from the refetched entries.

        Raises:
            ValidationError: If no identifiers are given.
            GatewayError: If the update or the refetch fails.
        """
        ids = list(dict.fromkeys(entry_ids))
        if not ids:
            raise ValidationError("No entries selected", field="entry_ids")

        patch = paid_status_patch(is_paid, self._today())
        try:
            updated = self._timesheets_repository.set_paid_status(
                ids,
                patch["is_paid"],
                patch["paid_date"],
            )
            entries = self._timesheets_repository.fetch_entries(
                start_date,
                end_date,
            )
        except GatewayError as exc:
            self._logger.error(
                f"Failed to mark {len(ids)} entries "
                f"{'paid' if is_paid else 'unpaid'}: {exc}"
            )
            raise

        self._logger.info(
            f"Marked {updated} entries {'paid' if is_paid else 'unpaid'}"
        )
        return build_timesheet_view(entries, start_date, end_date)

    def execute_for_day(
        self,
        work_date: date,
        is_paid: bool = True,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> TimesheetView:
        """Apply the paid status to every entry of one calendar day.

        Only entries whose status differs from ``is_paid`` are sent.

        Raises:
            ValidationError: If the day has no entry to change.
        """
        try:
            day_entries = self._timesheets_repository.fetch_entries(
                work_date,
                work_date,
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to load timesheets: {exc}")
            raise
        ids = [
            entry.entry_id
            for entry in day_entries
            if entry.entry_id is not None and entry.is_paid != is_paid
        ]
        return self.execute(ids, is_paid, start_date, end_date)


__all__ = ["TogglePaidStatusUseCase"]
