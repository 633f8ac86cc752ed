"""Tests for the account and debt use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from paytrack.application.use_cases.manage_accounts import (
    ManageAccountsUseCase,
)
from paytrack.application.use_cases.manage_debts import ManageDebtsUseCase
from paytrack.domain.constants import AccountType, DebtType
from paytrack.domain.exceptions import RecordNotFoundError, ValidationError
from paytrack.domain.models import BankAccount, CashAccount, Debt


def test_accounts_view_reports_net_worth():
    """The view should combine bank balances and cash."""
    repository = MagicMock()
    repository.fetch_bank_accounts.return_value = [
        BankAccount("1", "First", AccountType.CHECKING, Decimal("900")),
        BankAccount("2", "Second", AccountType.SAVINGS, Decimal("100")),
    ]
    repository.fetch_cash_account.return_value = CashAccount(
        "c",
        Decimal("25.50"),
    )

    view = ManageAccountsUseCase(repository, logger=MagicMock()).get_view()

    assert view.net_worth == Decimal("1025.50")
    assert len(view.bank_accounts) == 2


def test_add_bank_account_validates_input():
    """Bank accounts need a name and a known type."""
    repository = MagicMock()
    use_case = ManageAccountsUseCase(repository, logger=MagicMock())

    use_case.add_bank_account(" Credit Union ", "both", "12.34")

    account = repository.insert_bank_account.call_args.args[0]
    assert account.bank_name == "Credit Union"
    assert account.account_type is AccountType.BOTH
    assert account.current_balance == Decimal("12.34")

    with pytest.raises(ValidationError):
        use_case.add_bank_account("", "checking", "1")
    with pytest.raises(ValidationError):
        use_case.add_bank_account("Bank", "brokerage", "1")


def test_balance_updates_accept_negative_values():
    """Overdrawn balances and cash should be storable."""
    repository = MagicMock()
    use_case = ManageAccountsUseCase(repository, logger=MagicMock())

    use_case.update_bank_balance("1", "-40")
    use_case.set_cash_balance("15")

    repository.update_bank_balance.assert_called_once_with(
        "1",
        Decimal("-40"),
    )
    repository.save_cash_balance.assert_called_once_with(Decimal("15"))


def _debts_repository():
    repository = MagicMock()
    repository.fetch_debts.return_value = [
        Debt("d1", "Card", DebtType.CREDIT_CARD, Decimal("300")),
        Debt("d2", "Loan", DebtType.STUDENT_LOAN, Decimal("700")),
    ]
    return repository


def test_debts_view_totals():
    """The view should carry the total amount owed."""
    view = ManageDebtsUseCase(
        _debts_repository(),
        logger=MagicMock(),
    ).get_view()

    assert view.total_debt == Decimal("1000")


def test_payment_larger_than_debt_clamps_to_zero():
    """Overpaying should leave the debt at zero."""
    repository = _debts_repository()
    use_case = ManageDebtsUseCase(repository, logger=MagicMock())

    use_case.adjust_debt("d1", "-500")

    repository.update_debt_amount.assert_called_once_with("d1", Decimal("0"))


def test_adjust_unknown_debt_raises_not_found():
    """Adjusting a debt the user does not own should fail."""
    repository = _debts_repository()
    use_case = ManageDebtsUseCase(repository, logger=MagicMock())

    with pytest.raises(RecordNotFoundError):
        use_case.adjust_debt("missing", "10")

    repository.update_debt_amount.assert_not_called()


def test_add_debt_rejects_negative_amount():
    """A new debt cannot start below zero."""
    repository = MagicMock()
    use_case = ManageDebtsUseCase(repository, logger=MagicMock())

    with pytest.raises(ValidationError):
        use_case.add_debt("Card", "credit_card", "-1")

    use_case.add_debt("Card", DebtType.CREDIT_CARD, "0")
    debt = repository.insert_debt.call_args.args[0]
    assert debt.current_amount == Decimal("0")
