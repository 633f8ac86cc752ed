"""Port for debts."""

from decimal import Decimal
from typing import Protocol

from paytrack.domain.models import Debt


class DebtsRepositoryPort(Protocol):
    """Port exposing access to the current user's debts."""

    def fetch_debts(self) -> list[Debt]:
        """Return debts ordered by name."""

    def insert_debt(self, debt: Debt) -> Debt:
        """Insert a debt and return it with its identifier."""

    def update_debt_amount(self, debt_id: str, amount: Decimal) -> Debt:
        """Set the amount owed on one debt."""

    def delete_debt(self, debt_id: str) -> None:
        """Delete one debt."""


__all__ = ["DebtsRepositoryPort"]
