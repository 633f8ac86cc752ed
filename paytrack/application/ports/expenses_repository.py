"""Port for reading and writing expenses."""

from datetime import date
from typing import Any, Protocol

from paytrack.domain.models import ExpenseEntry


class ExpensesRepositoryPort(Protocol):
    """Port exposing CRUD access to the current user's expenses."""

    def fetch_expenses(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
    ) -> list[ExpenseEntry]:
        """Return expenses ordered by timestamp, newest first."""

    def insert_expense(self, expense: ExpenseEntry) -> ExpenseEntry:
        """Insert an expense and return it with its identifier."""

    def update_expense(
        self,
        expense_id: str,
        patch: dict[str, Any],
    ) -> ExpenseEntry:
        """Apply a column patch to one expense and return the stored row."""

    def delete_expense(self, expense_id: str) -> None:
        """Delete one expense."""


__all__ = ["ExpensesRepositoryPort"]
