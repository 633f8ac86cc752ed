"""Net worth, savings and debt computations."""

from collections.abc import Iterable
from decimal import Decimal

from paytrack.domain.models import BankAccount, CashAccount, Debt
from paytrack.utils.decimal_utils import coerce_decimal, round_to_int


def compute_net_worth(
    bank_accounts: Iterable[BankAccount],
    cash_account: CashAccount | None,
) -> Decimal:
    """Sum bank balances and the cash balance.

    Args:
        bank_accounts: Bank accounts of the user.
        cash_account: Cash account, or None when the user has none.

    Returns:
        Decimal: Total balance.
    """
    bank_total = sum(
        (account.current_balance for account in bank_accounts),
        Decimal("0"),
    )
    cash_total = (
        cash_account.current_balance
        if cash_account is not None
        else Decimal("0")
    )
    return bank_total + cash_total


def compute_net_savings(
    monthly_earnings: Decimal,
    monthly_expenses: Decimal,
) -> Decimal:
    """Return earnings minus expenses; may be negative."""
    return coerce_decimal(monthly_earnings) - coerce_decimal(monthly_expenses)


def compute_savings_rate(
    net_savings: Decimal,
    monthly_earnings: Decimal,
) -> int:
    """Express net savings as a whole percentage of earnings.

    Args:
        net_savings: Earnings minus expenses.
        monthly_earnings: Earnings of the period.

    Returns:
        int: Rounded percentage, or 0 when earnings are not positive.
    """
    earnings = coerce_decimal(monthly_earnings)
    if earnings <= 0:
        return 0
    return round_to_int(coerce_decimal(net_savings) / earnings * 100)


def compute_total_debt(debts: Iterable[Debt]) -> Decimal:
    """Return the total amount owed."""
    return sum((debt.current_amount for debt in debts), Decimal("0"))


def adjust_debt_amount(current: Decimal, change: Decimal) -> Decimal:
    """Apply a signed change to a debt, never going below zero."""
    return max(Decimal("0"), coerce_decimal(current) + coerce_decimal(change))


__all__ = [
    "compute_net_worth",
    "compute_net_savings",
    "compute_savings_rate",
    "compute_total_debt",
    "adjust_debt_amount",
]
