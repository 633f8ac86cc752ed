"""SQLAlchemy-backed repository for expenses."""

from datetime import date, datetime, time, timedelta
from typing import Any

from sqlalchemy import text

from paytrack.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from paytrack.domain.constants import ExpenseCategory, PaymentMethod
from paytrack.domain.models import ExpenseEntry
from paytrack.infrastructure.user_scoped_repository import (
    UserScopedRepository,
    build_update_sql,
)
from paytrack.utils.decimal_utils import coerce_decimal

EXPENSE_COLUMNS = (
    "id, expense_name, category, amount, date_time, payment_method, notes"
)

INSERT_EXPENSE_SQL = text(
    f"""
    INSERT INTO expenses (
        user_id,
        expense_name,
        category,
        amount,
        date_time,
        payment_method,
        notes
    )
    VALUES (
        :user_id,
        :expense_name,
        :category,
        :amount,
        :date_time,
        :payment_method,
        :notes
    )
    RETURNING {EXPENSE_COLUMNS}
    """
)


class SqlAlchemyExpensesRepository(
    UserScopedRepository,
    ExpensesRepositoryPort,
):
    """Repository backed by SQLAlchemy for the ``expenses`` table."""

    table_name = "expenses"
    patch_columns = {
        "name": "expense_name",
        "category": "category",
        "amount": "amount",
        "spent_at": "date_time",
        "payment_method": "payment_method",
        "notes": "notes",
    }

    def fetch_expenses(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
    ) -> list[ExpenseEntry]:
        """Return the user's expenses, newest first."""
        rows = self._fetch_rows(
            self._build_query(start_date, end_date, limit),
            self._params(**self._build_params(start_date, end_date, limit)),
            "load expenses",
        )
        return [self._to_expense(row) for row in rows]

    def insert_expense(self, expense: ExpenseEntry) -> ExpenseEntry:
        """Insert an expense and return the stored row."""
        row = self._write_returning(
            INSERT_EXPENSE_SQL,
            self._params(
                expense_name=expense.name,
                category=expense.category.value,
                amount=expense.amount,
                date_time=expense.spent_at,
                payment_method=expense.payment_method.value,
                notes=expense.notes,
            ),
            "add expense",
        )
        return self._to_expense(row)

    def update_expense(
        self,
        expense_id: str,
        patch: dict[str, Any],
    ) -> ExpenseEntry:
        """Apply a patch keyed by ExpenseEntry field names."""
        columns = self._map_patch(patch)
        row = self._write_returning(
            build_update_sql(self.table_name, list(columns), EXPENSE_COLUMNS),
            self._params(id=expense_id, **columns),
            "update expense",
        )
        return self._to_expense(row)

    def delete_expense(self, expense_id: str) -> None:
        """Delete one of the user's expenses."""
        self._delete(expense_id, "delete expense")

    @staticmethod
    def _build_query(
        start_date: date | None,
        end_date: date | None,
        limit: int | None,
    ):
        base_sql = f"""
        SELECT {EXPENSE_COLUMNS}
        FROM expenses
        WHERE user_id = :user_id
        """
        if start_date:
            base_sql += " AND date_time >= :start_at"
        if end_date:
            base_sql += " AND date_time < :end_before"
        base_sql += " ORDER BY date_time DESC"
        if limit:
            base_sql += " LIMIT :limit"
        return text(base_sql)

    @staticmethod
    def _build_params(
        start_date: date | None,
        end_date: date | None,
        limit: int | None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if start_date:
            params["start_at"] = datetime.combine(start_date, time.min)
        if end_date:
            params["end_before"] = datetime.combine(
                end_date + timedelta(days=1),
                time.min,
            )
        if limit:
            params["limit"] = limit
        return params

    @staticmethod
    def _to_expense(row) -> ExpenseEntry:
        return ExpenseEntry(
            expense_id=str(row.id),
            name=row.expense_name,
            category=ExpenseCategory(row.category),
            amount=coerce_decimal(row.amount),
            spent_at=row.date_time,
            payment_method=PaymentMethod(row.payment_method),
            notes=row.notes,
        )


__all__ = ["SqlAlchemyExpensesRepository"]
