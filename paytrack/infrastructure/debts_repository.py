"""SQLAlchemy-backed repository for debts."""

from decimal import Decimal

from sqlalchemy import text

from paytrack.application.ports.debts_repository import DebtsRepositoryPort
from paytrack.domain.constants import DebtType
from paytrack.domain.models import Debt
from paytrack.infrastructure.user_scoped_repository import (
    UserScopedRepository,
)
from paytrack.utils.decimal_utils import coerce_decimal

SELECT_DEBTS_SQL = text(
    """
    SELECT id, debt_name, debt_type, current_amount
    FROM debts
    WHERE user_id = :user_id
    ORDER BY debt_name
    """
)

INSERT_DEBT_SQL = text(
    """
    INSERT INTO debts (user_id, debt_name, debt_type, current_amount)
    VALUES (:user_id, :debt_name, :debt_type, :current_amount)
    RETURNING id, debt_name, debt_type, current_amount
    """
)

UPDATE_DEBT_AMOUNT_SQL = text(
    """
    UPDATE debts
    SET current_amount = :current_amount, updated_at = now()
    WHERE id = :id AND user_id = :user_id
    RETURNING id, debt_name, debt_type, current_amount
    """
)


class SqlAlchemyDebtsRepository(UserScopedRepository, DebtsRepositoryPort):
    """Repository backed by SQLAlchemy for the ``debts`` table."""

    table_name = "debts"

    def fetch_debts(self) -> list[Debt]:
        """Return the user's debts ordered by name."""
        rows = self._fetch_rows(SELECT_DEBTS_SQL, self._params(), "load debts")
        return [self._to_debt(row) for row in rows]

    def insert_debt(self, debt: Debt) -> Debt:
        """Insert a debt and return the stored row."""
        row = self._write_returning(
            INSERT_DEBT_SQL,
            self._params(
                debt_name=debt.debt_name,
                debt_type=debt.debt_type.value,
                current_amount=debt.current_amount,
            ),
            "add debt",
        )
        return self._to_debt(row)

    def update_debt_amount(self, debt_id: str, amount: Decimal) -> Debt:
        """Set the amount owed on one debt."""
        row = self._write_returning(
            UPDATE_DEBT_AMOUNT_SQL,
            self._params(id=debt_id, current_amount=amount),
            "update debt",
        )
        return self._to_debt(row)

    def delete_debt(self, debt_id: str) -> None:
        """Delete one of the user's debts."""
        self._delete(debt_id, "delete debt")

    @staticmethod
    def _to_debt(row) -> Debt:
        return Debt(
            debt_id=str(row.id),
            debt_name=row.debt_name,
            debt_type=DebtType(row.debt_type),
            current_amount=coerce_decimal(row.current_amount),
        )


__all__ = ["SqlAlchemyDebtsRepository"]
