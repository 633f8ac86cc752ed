"""Port for reading and writing timesheet entries."""

from collections.abc import Sequence
from datetime import date
from typing import Any, Protocol

from paytrack.domain.models import WorkEntry


class TimesheetsRepositoryPort(Protocol):
    """Port exposing CRUD access to the current user's work entries."""

    def fetch_entries(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[WorkEntry]:
        """Return entries ordered by work date, newest first."""

    def insert_entry(self, entry: WorkEntry) -> WorkEntry:
        """Insert an entry and return it with its identifier."""

    def update_entry(self, entry_id: str, patch: dict[str, Any]) -> WorkEntry:
        """Apply a column patch to one entry and return the stored row."""

    def delete_entry(self, entry_id: str) -> None:
        """Delete one entry."""

    def set_paid_status(
        self,
        entry_ids: Sequence[str],
        is_paid: bool,
        paid_date: date | None,
    ) -> int:
        """Update the paid status of every id in one transaction."""


__all__ = ["TimesheetsRepositoryPort"]
