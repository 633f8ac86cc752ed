"""Tests for the expense use cases."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from paytrack.application.use_cases.get_expense_breakdown import (
    GetExpenseBreakdownUseCase,
)
from paytrack.application.use_cases.manage_expenses import (
    DeleteExpenseUseCase,
    ExpenseForm,
    SaveExpenseUseCase,
)
from paytrack.domain.constants import ExpenseCategory, PaymentMethod
from paytrack.domain.exceptions import GatewayError, ValidationError
from paytrack.domain.models import ExpenseEntry

NOW = datetime(2024, 5, 4, 12, 30)


def _use_case(repository):
    return SaveExpenseUseCase(
        repository,
        logger=MagicMock(),
        now=lambda: NOW,
    )


def test_insert_uses_clock_and_parses_choices():
    """New expenses should be stamped now with validated enum values."""
    repository = MagicMock()
    repository.insert_expense.side_effect = lambda expense: replace(
        expense,
        expense_id="e1",
    )

    stored = _use_case(repository).execute(
        ExpenseForm(
            name=" Groceries ",
            amount="42.10",
            category="grocery",
            payment_method="cash",
            notes="   ",
        )
    )

    inserted = repository.insert_expense.call_args.args[0]
    assert inserted.name == "Groceries"
    assert inserted.amount == Decimal("42.10")
    assert inserted.category is ExpenseCategory.GROCERY
    assert inserted.payment_method is PaymentMethod.CASH
    assert inserted.notes is None
    assert inserted.spent_at == NOW
    assert stored.expense_id == "e1"


def test_update_keeps_timestamp_unless_given():
    """Edits should not move the expense in time by default."""
    repository = MagicMock()

    _use_case(repository).execute(
        ExpenseForm(name="Bus", amount="2.5", expense_id="e1")
    )

    expense_id, patch = repository.update_expense.call_args.args
    assert expense_id == "e1"
    assert "spent_at" not in patch
    assert patch["category"] is ExpenseCategory.OTHER
    assert patch["payment_method"] is PaymentMethod.DEBIT


@pytest.mark.parametrize(
    ("name", "amount", "category"),
    [
        ("Lunch", "0", "fast_food"),
        ("Lunch", "-3", "fast_food"),
        ("Lunch", "abc", "fast_food"),
        ("", "3", "fast_food"),
        ("Lunch", "3", "restaurants"),
    ],
)
def test_invalid_expense_is_rejected(name, amount, category):
    """Non-positive amounts, blank names and unknown categories fail."""
    repository = MagicMock()

    with pytest.raises(ValidationError):
        _use_case(repository).execute(
            ExpenseForm(name=name, amount=amount, category=category)
        )

    repository.insert_expense.assert_not_called()


def test_delete_propagates_gateway_errors():
    """Delete failures should be logged and re-raised."""
    repository = MagicMock()
    repository.delete_expense.side_effect = GatewayError("down")
    logger = MagicMock()

    with pytest.raises(GatewayError):
        DeleteExpenseUseCase(repository, logger=logger).execute("e1")

    logger.error.assert_called_once()


def test_breakdown_use_case_builds_view():
    """The view should hold category totals and day groups."""
    repository = MagicMock()
    repository.fetch_expenses.return_value = [
        ExpenseEntry(
            expense_id=str(index),
            name="item",
            category=category,
            amount=Decimal(amount),
            spent_at=spent_at,
            payment_method=PaymentMethod.DEBIT,
        )
        for index, (amount, category, spent_at) in enumerate(
            [
                ("50", ExpenseCategory.GROCERY, datetime(2024, 5, 1, 9)),
                ("30", ExpenseCategory.GROCERY, datetime(2024, 5, 2, 9)),
                ("20", ExpenseCategory.TRANSPORT, datetime(2024, 5, 2, 18)),
            ]
        )
    ]
    use_case = GetExpenseBreakdownUseCase(repository, logger=MagicMock())

    view = use_case.execute(date(2024, 5, 1), date(2024, 5, 31))

    assert view.breakdown.grand_total == Decimal("100")
    assert view.breakdown.totals[ExpenseCategory.GROCERY] == Decimal("80")
    assert [group.day for group in view.day_groups] == [
        date(2024, 5, 2),
        date(2024, 5, 1),
    ]
