"""Use cases to create, edit and delete expenses."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from paytrack.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from paytrack.domain.constants import ExpenseCategory, PaymentMethod
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import ExpenseEntry
from paytrack.domain.services.normalization import normalize_text
from paytrack.domain.services.validation import (
    parse_choice,
    parse_decimal,
    require_text,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ExpenseForm:
    """Raw values submitted from the expense form."""

    name: str
    amount: Decimal | str
    category: ExpenseCategory | str = ExpenseCategory.OTHER
    payment_method: PaymentMethod | str = PaymentMethod.DEBIT
    notes: str | None = None
    spent_at: datetime | None = None
    expense_id: str | None = None


class SaveExpenseUseCase:
    """Validate an expense form and insert or update the expense."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            expenses_repository: Port storing the user's expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            now: Clock used to timestamp new expenses.
        """
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()
        self._now = now

    def execute(self, form: ExpenseForm) -> ExpenseEntry:
        """Validate and persist the submitted expense.

        Raises:
            ValidationError: If the amount is not positive, the name is empty
                or an enumerated field is unknown.
            GatewayError: If the database call fails.
        """
        amount = parse_decimal(form.amount, "amount", strictly_positive=True)
        name = require_text(form.name, "name")
        category = parse_choice(ExpenseCategory, form.category, "category")
        payment_method = parse_choice(
            PaymentMethod,
            form.payment_method,
            "payment_method",
        )
        notes = normalize_text(form.notes)

        try:
            if form.expense_id:
                patch = {
                    "name": name,
                    "amount": amount,
                    "category": category,
                    "payment_method": payment_method,
                    "notes": notes,
                }
                if form.spent_at is not None:
                    patch["spent_at"] = form.spent_at
                stored = self._expenses_repository.update_expense(
                    form.expense_id,
                    patch,
                )
                self._logger.info(f"Updated expense {form.expense_id}")
            else:
                stored = self._expenses_repository.insert_expense(
                    ExpenseEntry(
                        expense_id=None,
                        name=name,
                        category=category,
                        amount=amount,
                        spent_at=form.spent_at or self._now(),
                        payment_method=payment_method,
                        notes=notes,
                    )
                )
                self._logger.info(
                    f"Added expense {stored.expense_id}: {category.value}"
                )
        except GatewayError as exc:
            self._logger.error(f"Failed to save expense: {exc}")
            raise
        return stored


class DeleteExpenseUseCase:
    """Delete one expense."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
    ) -> None:
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()

    def execute(self, expense_id: str) -> None:
        try:
            self._expenses_repository.delete_expense(expense_id)
        except GatewayError as exc:
            self._logger.error(f"Failed to delete expense {expense_id}: {exc}")
            raise
        self._logger.info(f"Deleted expense {expense_id}")


__all__ = ["ExpenseForm", "SaveExpenseUseCase", "DeleteExpenseUseCase"]
