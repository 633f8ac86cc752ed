"""SQLAlchemy-backed repository for bank and cash accounts."""

from decimal import Decimal

from sqlalchemy import text

from paytrack.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from paytrack.domain.constants import AccountType
from paytrack.domain.models import BankAccount, CashAccount
from paytrack.infrastructure.user_scoped_repository import (
    UserScopedRepository,
)
from paytrack.utils.decimal_utils import coerce_decimal

SELECT_BANK_ACCOUNTS_SQL = text(
    """
    SELECT id, bank_name, account_type, current_balance
    FROM bank_accounts
    WHERE user_id = :user_id
    ORDER BY bank_name
    """
)

INSERT_BANK_ACCOUNT_SQL = text(
    """
    INSERT INTO bank_accounts (
        user_id,
        bank_name,
        account_type,
        current_balance
    )
    VALUES (
        :user_id,
        :bank_name,
        :account_type,
        :current_balance
    )
    RETURNING id, bank_name, account_type, current_balance
    """
)

UPDATE_BANK_BALANCE_SQL = text(
    """
    UPDATE bank_accounts
    SET current_balance = :current_balance
    WHERE id = :id AND user_id = :user_id
    RETURNING id, bank_name, account_type, current_balance
    """
)

SELECT_CASH_ACCOUNT_SQL = text(
    """
    SELECT id, current_balance
    FROM cash_account
    WHERE user_id = :user_id
    """
)

UPSERT_CASH_ACCOUNT_SQL = text(
    """
    INSERT INTO cash_account (user_id, current_balance)
    VALUES (:user_id, :current_balance)
    ON CONFLICT (user_id) DO UPDATE
    SET current_balance = EXCLUDED.current_balance,
        updated_at = now()
    RETURNING id, current_balance
    """
)


class SqlAlchemyAccountsRepository(
    UserScopedRepository,
    AccountsRepositoryPort,
):
    """Repository backed by SQLAlchemy for bank and cash accounts."""

    table_name = "bank_accounts"

    def fetch_bank_accounts(self) -> list[BankAccount]:
        """Return the user's bank accounts ordered by name."""
        rows = self._fetch_rows(
            SELECT_BANK_ACCOUNTS_SQL,
            self._params(),
            "load bank accounts",
        )
        return [self._to_bank_account(row) for row in rows]

    def insert_bank_account(self, account: BankAccount) -> BankAccount:
        """Insert a bank account and return the stored row."""
        row = self._write_returning(
            INSERT_BANK_ACCOUNT_SQL,
            self._params(
                bank_name=account.bank_name,
                account_type=account.account_type.value,
                current_balance=account.current_balance,
            ),
            "add bank account",
        )
        return self._to_bank_account(row)

    def update_bank_balance(
        self,
        account_id: str,
        balance: Decimal,
    ) -> BankAccount:
        """Set the balance of one bank account."""
        row = self._write_returning(
            UPDATE_BANK_BALANCE_SQL,
            self._params(id=account_id, current_balance=balance),
            "update bank balance",
        )
        return self._to_bank_account(row)

    def delete_bank_account(self, account_id: str) -> None:
        """Delete one of the user's bank accounts."""
        self._delete(account_id, "delete bank account")

    def fetch_cash_account(self) -> CashAccount | None:
        """Return the cash account, or None when it does not exist."""
        rows = self._fetch_rows(
            SELECT_CASH_ACCOUNT_SQL,
            self._params(),
            "load cash account",
        )
        if not rows:
            return None
        return self._to_cash_account(rows[0])

    def save_cash_balance(self, balance: Decimal) -> CashAccount:
        """Create the cash account or overwrite its balance."""
        row = self._write_returning(
            UPSERT_CASH_ACCOUNT_SQL,
            self._params(current_balance=balance),
            "update cash balance",
        )
        return self._to_cash_account(row)

    @staticmethod
    def _to_bank_account(row) -> BankAccount:
        return BankAccount(
            account_id=str(row.id),
            bank_name=row.bank_name,
            account_type=AccountType(row.account_type),
            current_balance=coerce_decimal(row.current_balance),
        )

    @staticmethod
    def _to_cash_account(row) -> CashAccount:
        return CashAccount(
            account_id=str(row.id),
            current_balance=coerce_decimal(row.current_balance),
        )


__all__ = ["SqlAlchemyAccountsRepository"]
