"""Use case for tracking debts."""

from dataclasses import dataclass, field
from decimal import Decimal

from paytrack.application.ports.debts_repository import DebtsRepositoryPort
from paytrack.domain.constants import DebtType
from paytrack.domain.exceptions import GatewayError, RecordNotFoundError
from paytrack.domain.models import Debt
from paytrack.domain.services.balances import (
    adjust_debt_amount,
    compute_total_debt,
)
from paytrack.domain.services.validation import (
    parse_choice,
    parse_decimal,
    require_text,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DebtsView:
    """Debts with the total amount owed."""

    debts: list[Debt] = field(default_factory=list)
    total_debt: Decimal = Decimal("0")


class ManageDebtsUseCase:
    """Add, adjust and delete debts."""

    def __init__(
        self,
        debts_repository: DebtsRepositoryPort,
        logger=None,
    ) -> None:
        self._debts_repository = debts_repository
        self._logger = logger or get_app_logger()

    def get_view(self) -> DebtsView:
        """Return all debts and their total."""
        try:
            debts = self._debts_repository.fetch_debts()
        except GatewayError as exc:
            self._logger.error(f"Failed to load debts: {exc}")
            raise
        return DebtsView(debts=debts, total_debt=compute_total_debt(debts))

    def add_debt(
        self,
        debt_name: str,
        debt_type: DebtType | str,
        amount: Decimal | str,
    ) -> Debt:
        """Validate and insert a debt."""
        debt = Debt(
            debt_id=None,
            debt_name=require_text(debt_name, "debt_name"),
            debt_type=parse_choice(DebtType, debt_type, "debt_type"),
            current_amount=parse_decimal(
                amount,
                "current_amount",
                minimum=Decimal("0"),
            ),
        )
        try:
            stored = self._debts_repository.insert_debt(debt)
        except GatewayError as exc:
            self._logger.error(f"Failed to add debt: {exc}")
            raise
        self._logger.info(f"Added debt {stored.debt_id}")
        return stored

    def adjust_debt(self, debt_id: str, change: Decimal | str) -> Debt:
        """Add a signed change to a debt, clamping the result at zero.

        Args:
            debt_id: Identifier of the debt.
            change: Positive to borrow more, negative for a repayment.

        Returns:
            Debt: Stored debt with its new amount.

        Raises:
            RecordNotFoundError: If the debt does not exist.
        """
        delta = parse_decimal(change, "change")
        try:
            debts = self._debts_repository.fetch_debts()
            current = next(
                (debt for debt in debts if debt.debt_id == debt_id),
                None,
            )
            if current is None:
                raise RecordNotFoundError(f"Debt {debt_id} not found")
            new_amount = adjust_debt_amount(current.current_amount, delta)
            stored = self._debts_repository.update_debt_amount(
                debt_id,
                new_amount,
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to update debt: {exc}")
            raise
        self._logger.info(f"Debt {debt_id} adjusted to {new_amount}")
        return stored

    def delete_debt(self, debt_id: str) -> None:
        try:
            self._debts_repository.delete_debt(debt_id)
        except GatewayError as exc:
            self._logger.error(f"Failed to delete debt: {exc}")
            raise
        self._logger.info(f"Deleted debt {debt_id}")


__all__ = ["ManageDebtsUseCase", "DebtsView"]
