"""Use case for bank and cash account balances."""

from dataclasses import dataclass, field
from decimal import Decimal

from paytrack.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from paytrack.domain.constants import AccountType
from paytrack.domain.exceptions import GatewayError
from paytrack.domain.models import BankAccount, CashAccount
from paytrack.domain.services.balances import compute_net_worth
from paytrack.domain.services.validation import (
    parse_choice,
    parse_decimal,
    require_text,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AccountsView:
    """Accounts with the resulting net worth."""

    bank_accounts: list[BankAccount] = field(default_factory=list)
    cash_account: CashAccount | None = None
    net_worth: Decimal = Decimal("0")


class ManageAccountsUseCase:
    """Add, edit and delete accounts and compute the net worth."""

    def __init__(
        self,
        accounts_repository: AccountsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port storing bank and cash accounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._accounts_repository = accounts_repository
        self._logger = logger or get_app_logger()

    def get_view(self) -> AccountsView:
        """Return all accounts and their net worth."""
        try:
            bank_accounts = self._accounts_repository.fetch_bank_accounts()
            cash_account = self._accounts_repository.fetch_cash_account()
        except GatewayError as exc:
            self._logger.error(f"Failed to load accounts: {exc}")
            raise
        net_worth = compute_net_worth(bank_accounts, cash_account)
        self._logger.info(
            f"Net worth computed over {len(bank_accounts)} bank accounts: "
            f"{net_worth}"
        )
        return AccountsView(
            bank_accounts=bank_accounts,
            cash_account=cash_account,
            net_worth=net_worth,
        )

    def add_bank_account(
        self,
        bank_name: str,
        account_type: AccountType | str,
        balance: Decimal | str,
    ) -> BankAccount:
        """Validate and insert a bank account."""
        account = BankAccount(
            account_id=None,
            bank_name=require_text(bank_name, "bank_name"),
            account_type=parse_choice(
                AccountType,
                account_type,
                "account_type",
            ),
            current_balance=parse_decimal(balance, "current_balance"),
        )
        try:
            stored = self._accounts_repository.insert_bank_account(account)
        except GatewayError as exc:
            self._logger.error(f"Failed to add account: {exc}")
            raise
        self._logger.info(f"Added bank account {stored.account_id}")
        return stored

    def update_bank_balance(
        self,
        account_id: str,
        balance: Decimal | str,
    ) -> BankAccount:
        """Validate and store a new bank balance."""
        amount = parse_decimal(balance, "current_balance")
        try:
            stored = self._accounts_repository.update_bank_balance(
                account_id,
                amount,
            )
        except GatewayError as exc:
            self._logger.error(f"Failed to update balance: {exc}")
            raise
        self._logger.info(f"Updated balance of bank account {account_id}")
        return stored

    def delete_bank_account(self, account_id: str) -> None:
        try:
            self._accounts_repository.delete_bank_account(account_id)
        except GatewayError as exc:
            self._logger.error(f"Failed to delete account: {exc}")
            raise
        self._logger.info(f"Deleted bank account {account_id}")

    def set_cash_balance(self, balance: Decimal | str) -> CashAccount:
        """Validate and store the cash balance."""
        amount = parse_decimal(balance, "cash_balance")
        try:
            stored = self._accounts_repository.save_cash_balance(amount)
        except GatewayError as exc:
            self._logger.error(f"Failed to update cash: {exc}")
            raise
        self._logger.info("Updated cash balance")
        return stored


__all__ = ["ManageAccountsUseCase", "AccountsView"]
