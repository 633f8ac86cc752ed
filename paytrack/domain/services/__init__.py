"""Domain services package."""

from .balances import (
    adjust_debt_amount,
    compute_net_savings,
    compute_net_worth,
    compute_savings_rate,
    compute_total_debt,
)
from .earnings import (
    compute_earnings_summary,
    filter_work_entries,
    summarize_days,
    unique_job_names,
)
from .expenses import (
    compute_expense_breakdown,
    filter_expenses,
    group_expenses_by_day,
    latest_expenses,
)
from .normalization import day_of_week_label, normalize_text
from .periods import in_window, month_window, shift_month
from .time_window import compute_hours, parse_clock_time
from .validation import parse_choice, parse_date, parse_decimal, require_text

__all__ = [
    "adjust_debt_amount",
    "compute_net_savings",
    "compute_net_worth",
    "compute_savings_rate",
    "compute_total_debt",
    "compute_earnings_summary",
    "filter_work_entries",
    "summarize_days",
    "unique_job_names",
    "compute_expense_breakdown",
    "filter_expenses",
    "group_expenses_by_day",
    "latest_expenses",
    "day_of_week_label",
    "normalize_text",
    "in_window",
    "month_window",
    "shift_month",
    "compute_hours",
    "parse_clock_time",
    "parse_choice",
    "parse_date",
    "parse_decimal",
    "require_text",
]
