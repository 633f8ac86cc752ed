"""Calendar window helpers."""

import calendar
from datetime import date


def month_window(day: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``day``."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return date(day.year, day.month, 1), date(day.year, day.month, last_day)


def shift_month(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``.

    Args:
        day: Any date inside the reference month.
        months: Signed number of months to move.

    Returns:
        date: First day of the target month.
    """
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def in_window(
    day: date,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    """Return True when ``day`` lies in the inclusive window."""
    if start_date is not None and day < start_date:
        return False
    if end_date is not None and day > end_date:
        return False
    return True


__all__ = ["month_window", "shift_month", "in_window"]
