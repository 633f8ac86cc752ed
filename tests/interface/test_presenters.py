"""Tests for the Streamlit presentation helpers."""

from datetime import date, datetime, time
from decimal import Decimal

from paytrack.adapters.interface.streamlit import presenters
from paytrack.domain.constants import ExpenseCategory, PaymentMethod
from paytrack.domain.models import (
    DaySummary,
    ExpenseBreakdown,
    ExpenseEntry,
    WorkEntry,
)


def test_money_and_hours_formatting():
    """Money uses two decimals with the symbol; hours one decimal."""
    assert presenters.format_money(Decimal("1234.5"), "$") == "$1,234.50"
    assert presenters.format_money(Decimal("-50"), "€") == "-€50.00"
    assert presenters.format_hours(Decimal("4")) == "4.0h"


def test_work_entry_rows_show_shift_and_status():
    """Time-based entries should show their shift and paid date."""
    entry = WorkEntry(
        entry_id="a",
        job_name="Bar",
        hours_worked=Decimal("4.0"),
        hourly_rate=Decimal("20"),
        work_date=date(2024, 5, 3),
        day_of_week="Friday",
        time_in=time(22, 0),
        time_out=time(2, 0),
        is_paid=True,
        paid_date=date(2024, 5, 10),
    )

    (row,) = presenters.work_entry_rows([entry], "$")

    assert row["Shift"] == "22:00 - 02:00"
    assert row["Earnings"] == "$80.00"
    assert row["Status"] == "Paid 2024-05-10"


def test_day_summary_rows_status():
    """Days should be labeled by how much of them is paid."""
    days = [
        DaySummary(date(2024, 5, 1), Decimal("5"), Decimal("75"), ("a",), ()),
        DaySummary(
            date(2024, 5, 2),
            Decimal("3"),
            Decimal("60"),
            ("b", "c"),
            ("c",),
        ),
        DaySummary(
            date(2024, 5, 3),
            Decimal("1"),
            Decimal("9"),
            ("d",),
            ("d",),
        ),
    ]

    rows = presenters.day_summary_rows(days, "$")
    statuses = [row["Status"] for row in rows]

    assert statuses == ["Paid", "Partially paid", "Unpaid"]


def test_expense_rows_use_labels():
    """Expense rows should display enum labels."""
    expense = ExpenseEntry(
        expense_id="e1",
        name="Burger",
        category=ExpenseCategory.FAST_FOOD,
        amount=Decimal("9.5"),
        spent_at=datetime(2024, 5, 2, 12, 15),
        payment_method=PaymentMethod.BANK_TRANSFER,
    )

    (row,) = presenters.expense_rows([expense], "$")

    assert row["Category"] == "Fast Food"
    assert row["Payment"] == "Bank Transfer"
    assert row["Time"] == "2024-05-02 12:15"


def test_category_chart_groups_tail_into_other():
    """Categories beyond the limit should be merged."""
    breakdown = ExpenseBreakdown(
        totals={
            ExpenseCategory.RENT: Decimal("500"),
            ExpenseCategory.GROCERY: Decimal("300"),
            ExpenseCategory.TRANSPORT: Decimal("150"),
            ExpenseCategory.OTHER: Decimal("50"),
        },
        grand_total=Decimal("1000"),
    )

    data = presenters.prepare_category_chart_data(
        breakdown,
        "$",
        max_categories=2,
    )

    assert [item["category"] for item in data] == [
        "Rent",
        "Grocery",
        "Other categories",
    ]
    assert data[2]["amount"] == 200.0
    assert data[0]["share_label"] == "50.0%"
    assert data[0]["amount_label"] == "$500.00"


def test_option_labels_skip_unsaved_records():
    """Only stored records can be selected."""
    records = [
        ExpenseEntry(
            expense_id=expense_id,
            name=name,
            category=ExpenseCategory.OTHER,
            amount=Decimal("1"),
            spent_at=datetime(2024, 5, 1),
            payment_method=PaymentMethod.CASH,
        )
        for expense_id, name in [(None, "draft"), ("e1", "saved")]
    ]

    labels = presenters.option_labels(
        records,
        "expense_id",
        lambda item: item.name,
    )

    assert labels == {"e1": "saved"}
