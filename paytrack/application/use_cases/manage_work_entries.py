"""Use cases to create, edit and delete timesheet entries."""

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal

from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import WorkEntry
from paytrack.domain.services.normalization import day_of_week_label
from paytrack.domain.services.time_window import (
    compute_hours,
    parse_clock_time,
)
from paytrack.domain.services.validation import (
    parse_date,
    parse_decimal,
    require_text,
)
from paytrack.infrastructure.logging.logger import get_app_logger
from paytrack.utils.decimal_utils import round_half_up


@dataclass(frozen=True)
class WorkEntryForm:
    """Raw values submitted from the timesheet form.

    When both ``time_in`` and ``time_out`` are given the hours are computed
    from them and ``hours_worked`` is ignored.
    """

    job_name: str
    work_date: date | str
    hourly_rate: Decimal | str
    hours_worked: Decimal | str | None = None
    time_in: time | str | None = None
    time_out: time | str | None = None
    entry_id: str | None = None

    @property
    def is_time_based(self) -> bool:
        """Return True when both clock times were filled in."""
        return _is_filled(self.time_in) and _is_filled(self.time_out)


def _is_filled(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def resolve_hours(form: WorkEntryForm) -> Decimal:
    """Return the hours stored for a submitted form.

    Raises:
        ValidationError: If the hours are missing or negative.
        InvalidTimeRangeError: If the clock times give a negative duration.
    """
    if form.is_time_based:
        return compute_hours(form.time_in, form.time_out)
    hours = parse_decimal(
        form.hours_worked,
        "hours_worked",
        minimum=Decimal("0"),
    )
    return round_half_up(hours)


class SaveWorkEntryUseCase:
    """Validate a timesheet form and insert or update the entry."""

    def __init__(
        self,
        timesheets_repository: TimesheetsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            timesheets_repository: Port storing the user's work entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._timesheets_repository = timesheets_repository
        self._logger = logger or get_app_logger()

    def execute(self, form: WorkEntryForm) -> WorkEntry:
        """Validate and persist the submitted entry.

        Nothing is written when validation fails.

        Args:
            form: Raw form values.

        Returns:
            WorkEntry: Stored entry as returned by the repository.

        Raises:
            ValidationError: If any field is rejected.
            GatewayError: If the database call fails.
        """
        job_name = require_text(form.job_name, "job_name")
        work_date = parse_date(form.work_date, "work_date")
        hourly_rate = parse_decimal(
            form.hourly_rate,
            "hourly_rate",
            minimum=Decimal("0"),
        )
        hours = resolve_hours(form)
        time_in = (
            parse_clock_time(form.time_in, "time_in")
            if _is_filled(form.time_in)
            else None
        )
        time_out = (
            parse_clock_time(form.time_out, "time_out")
            if _is_filled(form.time_out)
            else None
        )
        day_of_week = day_of_week_label(work_date)

        try:
            if form.entry_id:
                stored = self._timesheets_repository.update_entry(
                    form.entry_id,
                    {
                        "job_name": job_name,
                        "hours_worked": hours,
                        "hourly_rate": hourly_rate,
                        "work_date": work_date,
                        "day_of_week": day_of_week,
                        "time_in": time_in,
                        "time_out": time_out,
                    },
                )
                self._logger.info(f"Updated timesheet {form.entry_id}")
            else:
                stored = self._timesheets_repository.insert_entry(
                    WorkEntry(
                        entry_id=None,
                        job_name=job_name,
                        hours_worked=hours,
                        hourly_rate=hourly_rate,
                        work_date=work_date,
                        day_of_week=day_of_week,
                        time_in=time_in,
                        time_out=time_out,
                    )
                )
                self._logger.info(
                    f"Added timesheet {stored.entry_id} for {work_date}"
                )
        except GatewayError as exc:
            self._logger.error(f"Failed to save timesheet: {exc}")
            raise
        return stored


class DeleteWorkEntryUseCase:
    """Delete one timesheet entry."""

    def __init__(
        self,
        timesheets_repository: TimesheetsRepositoryPort,
        logger=None,
    ) -> None:
        self._timesheets_repository = timesheets_repository
        self._logger = logger or get_app_logger()

    def execute(self, entry_id: str) -> None:
        try:
            self._timesheets_repository.delete_entry(entry_id)
        except GatewayError as exc:
            self._logger.error(f"Failed to delete timesheet {entry_id}: {exc}")
            raise
        self._logger.info(f"Deleted timesheet {entry_id}")


__all__ = [
    "WorkEntryForm",
    "SaveWorkEntryUseCase",
    "DeleteWorkEntryUseCase",
    "resolve_hours",
]
