"""Presentation helpers for the Streamlit UI.

This module holds pure transformations from the use case views to the
rows, labels and chart data rendered by ``app.py``. Nothing here touches
Streamlit or the database, so every helper can be tested directly.
"""

from collections.abc import Sequence
from decimal import Decimal

from paytrack.domain.models import (
    BankAccount,
    DaySummary,
    Debt,
    ExpenseBreakdown,
    ExpenseEntry,
    WorkEntry,
)

DEFAULT_PALETTE = (
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
)


def format_money(value: Decimal, currency_symbol: str) -> str:
    """Format an amount with the currency symbol and two decimals."""
    sign = "-" if value < 0 else ""
    return f"{sign}{currency_symbol}{abs(value):,.2f}"


def format_hours(value: Decimal) -> str:
    """Format hours with one decimal."""
    return f"{value:.1f}h"


def format_time_range(entry: WorkEntry) -> str:
    """Return ``HH:MM - HH:MM`` for time-based entries, else ""."""
    if not entry.is_time_based:
        return ""
    return f"{entry.time_in:%H:%M} - {entry.time_out:%H:%M}"


def work_entry_rows(
    entries: Sequence[WorkEntry],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Build table rows for work entries."""
    return [
        {
            "Date": entry.work_date.isoformat(),
            "Day": entry.day_of_week,
            "Job": entry.job_name,
            "Shift": format_time_range(entry),
            "Hours": format_hours(entry.hours_worked),
            "Rate": format_money(entry.hourly_rate, currency_symbol),
            "Earnings": format_money(entry.earnings, currency_symbol),
            "Status": (
                f"Paid {entry.paid_date:%Y-%m-%d}"
                if entry.is_paid
                else "Unpaid"
            ),
        }
        for entry in entries
    ]


def day_summary_rows(
    days: Sequence[DaySummary],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Build one calendar row per worked day."""
    rows = []
    for day in days:
        if day.all_paid:
            status = "Paid"
        elif day.any_paid:
            status = "Partially paid"
        else:
            status = "Unpaid"
        rows.append(
            {
                "Date": day.work_date.isoformat(),
                "Hours": format_hours(day.hours),
                "Earnings": format_money(day.earnings, currency_symbol),
                "Status": status,
            }
        )
    return rows


def expense_rows(
    expenses: Sequence[ExpenseEntry],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Build table rows for expenses."""
    return [
        {
            "Time": f"{expense.spent_at:%Y-%m-%d %H:%M}",
            "Name": expense.name,
            "Category": expense.category.label,
            "Payment": expense.payment_method.label,
            "Amount": format_money(expense.amount, currency_symbol),
            "Notes": expense.notes or "",
        }
        for expense in expenses
    ]


def bank_account_rows(
    accounts: Sequence[BankAccount],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Build table rows for bank accounts."""
    return [
        {
            "Bank": account.bank_name,
            "Type": account.account_type.label,
            "Balance": format_money(account.current_balance, currency_symbol),
        }
        for account in accounts
    ]


def debt_rows(
    debts: Sequence[Debt],
    currency_symbol: str,
) -> list[dict[str, str]]:
    """Build table rows for debts."""
    return [
        {
            "Debt": debt.debt_name,
            "Type": debt.debt_type.label,
            "Amount": format_money(debt.current_amount, currency_symbol),
        }
        for debt in debts
    ]


def option_labels(records: Sequence, id_attr: str, label) -> dict[str, str]:
    """Map record ids to selectbox labels, skipping unsaved records."""
    return {
        getattr(record, id_attr): label(record)
        for record in records
        if getattr(record, id_attr) is not None
    }


def prepare_category_chart_data(
    breakdown: ExpenseBreakdown,
    currency_symbol: str,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        breakdown: Spending totals by category.
        currency_symbol: Symbol used in the amount labels.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        list[dict]: Altair-ready rows sorted by amount, largest first.
    """
    items = sorted(
        (
            (category.label, amount)
            for category, amount in breakdown.totals.items()
        ),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = items[:max_categories]
    other_amount = sum(
        (amount for _, amount in items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other categories", other_amount))

    total = breakdown.grand_total
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": format_money(amount, currency_symbol),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def income_vs_expenses_data(
    earnings: Decimal,
    expenses: Decimal,
) -> list[dict[str, str | float]]:
    """Return bar chart rows comparing income and spending."""
    return [
        {"kind": "Income", "amount": float(earnings)},
        {"kind": "Expenses", "amount": float(expenses)},
    ]


__all__ = [
    "DEFAULT_PALETTE",
    "format_money",
    "format_hours",
    "format_time_range",
    "work_entry_rows",
    "day_summary_rows",
    "expense_rows",
    "bank_account_rows",
    "debt_rows",
    "option_labels",
    "prepare_category_chart_data",
    "income_vs_expenses_data",
]
