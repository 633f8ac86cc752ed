"""Tests for boundary validation, normalization and periods."""

from datetime import date
from decimal import Decimal

import pytest

from paytrack.domain.constants import ExpenseCategory
from paytrack.domain.exceptions import ValidationError
from paytrack.domain.services.normalization import (
    day_of_week_label,
    normalize_text,
)
from paytrack.domain.services.periods import (
    in_window,
    month_window,
    shift_month,
)
from paytrack.domain.services.validation import (
    parse_choice,
    parse_date,
    parse_decimal,
    require_text,
)


def test_require_text_strips_and_rejects_blank():
    """Text should be stripped and blank input refused."""
    assert require_text("  Cafe ", "job_name") == "Cafe"
    with pytest.raises(ValidationError) as exc_info:
        require_text("   ", "job_name")
    assert exc_info.value.field == "job_name"


def test_parse_decimal_bounds():
    """Numbers should parse and honor their bounds."""
    assert parse_decimal("12.50", "amount") == Decimal("12.50")
    assert parse_decimal(3, "amount") == Decimal("3")
    assert parse_decimal("0", "hours", minimum=Decimal("0")) == Decimal("0")

    with pytest.raises(ValidationError, match="greater than 0"):
        parse_decimal("0", "amount", strictly_positive=True)
    with pytest.raises(ValidationError, match="at least 0"):
        parse_decimal("-1", "hours", minimum=Decimal("0"))


@pytest.mark.parametrize("raw", [None, "", "abc", "NaN", "Infinity"])
def test_parse_decimal_rejects_non_numbers(raw):
    """Missing and non-finite values should be refused."""
    with pytest.raises(ValidationError):
        parse_decimal(raw, "amount")


def test_parse_date_accepts_iso_strings():
    """ISO strings and date objects should both be accepted."""
    assert parse_date("2024-05-01", "work_date") == date(2024, 5, 1)
    assert parse_date(date(2024, 5, 2), "work_date") == date(2024, 5, 2)
    with pytest.raises(ValidationError):
        parse_date("05/01/2024", "work_date")


def test_parse_choice_validates_closed_values():
    """Only declared enumeration values should be accepted."""
    assert parse_choice(ExpenseCategory, "grocery", "category") is (
        ExpenseCategory.GROCERY
    )
    assert parse_choice(
        ExpenseCategory,
        ExpenseCategory.RENT,
        "category",
    ) is ExpenseCategory.RENT
    with pytest.raises(ValidationError, match="category must be one of"):
        parse_choice(ExpenseCategory, "groceries", "category")


def test_normalization_helpers():
    """Blank text should map to None and weekdays be named."""
    assert normalize_text("  ") is None
    assert normalize_text(None) is None
    assert normalize_text(" note ") == "note"
    assert day_of_week_label(date(2024, 5, 1)) == "Wednesday"


def test_month_window_and_navigation():
    """Month windows should span whole months, leap years included."""
    assert month_window(date(2024, 2, 14)) == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )
    assert shift_month(date(2024, 1, 31), -1) == date(2023, 12, 1)
    assert shift_month(date(2024, 12, 5), 1) == date(2025, 1, 1)
    assert shift_month(date(2024, 5, 20), 0) == date(2024, 5, 1)


def test_in_window_is_inclusive_and_open_ended():
    """Bounds should be inclusive and None should mean unbounded."""
    day = date(2024, 5, 1)

    assert in_window(day, day, day)
    assert in_window(day, None, None)
    assert not in_window(day, date(2024, 5, 2), None)
    assert not in_window(day, None, date(2024, 4, 30))
