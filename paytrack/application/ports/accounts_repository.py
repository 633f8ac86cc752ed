"""Port for bank and cash account balances."""

from decimal import Decimal
from typing import Protocol

from paytrack.domain.models import BankAccount, CashAccount


class AccountsRepositoryPort(Protocol):
    """Port exposing access to the current user's accounts."""

    def fetch_bank_accounts(self) -> list[BankAccount]:
        """Return bank accounts ordered by name."""

    def insert_bank_account(self, account: BankAccount) -> BankAccount:
        """Insert a bank account and return it with its identifier."""

    def update_bank_balance(
        self,
        account_id: str,
        balance: Decimal,
    ) -> BankAccount:
        """Set the balance of one bank account."""

    def delete_bank_account(self, account_id: str) -> None:
        """Delete one bank account."""

    def fetch_cash_account(self) -> CashAccount | None:
        """Return the cash account, or None when not created yet."""

    def save_cash_balance(self, balance: Decimal) -> CashAccount:
        """Create or update the cash account balance."""


__all__ = ["AccountsRepositoryPort"]
