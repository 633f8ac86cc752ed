"""SQLAlchemy-backed repository for timesheet entries."""

from collections.abc import Sequence
from datetime import date
from typing import Any

from sqlalchemy import bindparam, text

from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.domain.exceptions import RecordNotFoundError
from paytrack.domain.models import WorkEntry
from paytrack.infrastructure.user_scoped_repository import (
    UserScopedRepository,
    build_update_sql,
)
from paytrack.utils.decimal_utils import coerce_decimal

TIMESHEET_COLUMNS = (
    "id, job_name, hours_worked, hourly_pay, work_date, day_of_week, "
    "time_from, time_to, is_paid, paid_date"
)

INSERT_TIMESHEET_SQL = text(
    f"""
    INSERT INTO timesheets (
        user_id,
        job_name,
        hours_worked,
        hourly_pay,
        work_date,
        day_of_week,
        time_from,
        time_to,
        is_paid,
        paid_date
    )
    VALUES (
        :user_id,
        :job_name,
        :hours_worked,
        :hourly_pay,
        :work_date,
        :day_of_week,
        :time_from,
        :time_to,
        :is_paid,
        :paid_date
    )
    RETURNING {TIMESHEET_COLUMNS}
    """
)

SET_PAID_STATUS_SQL = text(
    """
    UPDATE timesheets
    SET is_paid = :is_paid, paid_date = :paid_date
    WHERE user_id = :user_id AND id IN :entry_ids
    """
).bindparams(bindparam("entry_ids", expanding=True))


class SqlAlchemyTimesheetsRepository(
    UserScopedRepository,
    TimesheetsRepositoryPort,
):
    """Repository backed by SQLAlchemy for the ``timesheets`` table."""

    table_name = "timesheets"
    patch_columns = {
        "job_name": "job_name",
        "hours_worked": "hours_worked",
        "hourly_rate": "hourly_pay",
        "work_date": "work_date",
        "day_of_week": "day_of_week",
        "time_in": "time_from",
        "time_out": "time_to",
        "is_paid": "is_paid",
        "paid_date": "paid_date",
    }

    def fetch_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[WorkEntry]:
        """Return the user's entries, newest work date first."""
        rows = self._fetch_rows(
            self._build_query(start_date, end_date),
            self._params(**self._build_params(start_date, end_date)),
            "load timesheets",
        )
        return [self._to_entry(row) for row in rows]

    def insert_entry(self, entry: WorkEntry) -> WorkEntry:
        """Insert an entry and return the stored row."""
        row = self._write_returning(
            INSERT_TIMESHEET_SQL,
            self._params(
                job_name=entry.job_name,
                hours_worked=entry.hours_worked,
                hourly_pay=entry.hourly_rate,
                work_date=entry.work_date,
                day_of_week=entry.day_of_week,
                time_from=entry.time_in,
                time_to=entry.time_out,
                is_paid=entry.is_paid,
                paid_date=entry.paid_date,
            ),
            "add timesheet",
        )
        return self._to_entry(row)

    def update_entry(self, entry_id: str, patch: dict[str, Any]) -> WorkEntry:
        """Apply a patch keyed by WorkEntry field names."""
        columns = self._map_patch(patch)
        row = self._write_returning(
            build_update_sql(
                self.table_name,
                list(columns),
                TIMESHEET_COLUMNS,
            ),
            self._params(id=entry_id, **columns),
            "update timesheet",
        )
        return self._to_entry(row)

    def delete_entry(self, entry_id: str) -> None:
        """Delete one of the user's entries."""
        self._delete(entry_id, "delete timesheet")

    def set_paid_status(
        self,
        entry_ids: Sequence[str],
        is_paid: bool,
        paid_date: date | None,
    ) -> int:
        """Update the paid status of all ids in a single transaction.

        The transaction is rolled back unless every id belongs to the user.

        Returns:
            int: Number of rows updated.
        """
        ids = list(entry_ids)
        if not ids:
            return 0
        params = self._params(
            entry_ids=ids,
            is_paid=is_paid,
            paid_date=paid_date,
        )
        with self._gateway_call("update paid status"):
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                updated = conn.execute(SET_PAID_STATUS_SQL, params).rowcount
                if updated != len(ids):
                    raise RecordNotFoundError(
                        f"Expected {len(ids)} timesheets, matched {updated}"
                    )
        return updated

    @staticmethod
    def _build_query(
        start_date: date | None,
        end_date: date | None,
    ):
        base_sql = f"""
        SELECT {TIMESHEET_COLUMNS}
        FROM timesheets
        WHERE user_id = :user_id
        """
        if start_date:
            base_sql += " AND work_date >= :start_date"
        if end_date:
            base_sql += " AND work_date <= :end_date"
        base_sql += " ORDER BY work_date DESC, created_at DESC"
        return text(base_sql)

    @staticmethod
    def _build_params(
        start_date: date | None,
        end_date: date | None,
    ) -> dict[str, date]:
        params: dict[str, date] = {}
        if start_date:
            params["start_date"] = start_date
        if end_date:
            params["end_date"] = end_date
        return params

    @staticmethod
    def _to_entry(row) -> WorkEntry:
        return WorkEntry(
            entry_id=str(row.id),
            job_name=row.job_name,
            hours_worked=coerce_decimal(row.hours_worked),
            hourly_rate=coerce_decimal(row.hourly_pay),
            work_date=row.work_date,
            day_of_week=row.day_of_week,
            time_in=row.time_from,
            time_out=row.time_to,
            is_paid=bool(row.is_paid),
            paid_date=row.paid_date,
        )


__all__ = ["SqlAlchemyTimesheetsRepository", "SET_PAID_STATUS_SQL"]
