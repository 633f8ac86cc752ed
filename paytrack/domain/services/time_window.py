"""Clock-time arithmetic for timesheet entries."""

from datetime import time
from decimal import Decimal

from paytrack.domain.constants import MINUTES_PER_DAY
from paytrack.domain.exceptions import InvalidTimeRangeError, ValidationError
from paytrack.utils.decimal_utils import round_half_up


def parse_clock_time(value: time | str, field: str = "time") -> time:
    """Parse a 24-hour clock time.

    Args:
        value: ``datetime.time`` or an ``HH:MM`` / ``HH:MM:SS`` string.
        field: Field name used in the error message.

    Returns:
        time: Parsed clock time.

    Raises:
        ValidationError: If the string is not a valid clock time.
    """
    if isinstance(value, time):
        return value
    parts = str(value).strip().split(":")
    if len(parts) not in (2, 3) or not all(part.isdigit() for part in parts):
        raise ValidationError(f"Invalid {field}: {value!r}", field=field)
    hour, minute = int(parts[0]), int(parts[1])
    second = int(parts[2]) if len(parts) == 3 else 0
    try:
        return time(hour, minute, second)
    except ValueError as exc:
        raise ValidationError(
            f"Invalid {field}: {value!r}",
            field=field,
        ) from exc


def minutes_since_midnight(value: time) -> int:
    """Return the whole minutes elapsed since midnight."""
    return value.hour * 60 + value.minute


def compute_hours(time_in: time | str, time_out: time | str) -> Decimal:
    """Convert a time-in/time-out pair into decimal hours.

    A time-out earlier than the time-in is treated as the next day, so a
    shift always spans less than 24 hours.

    Args:
        time_in: Clock-in time.
        time_out: Clock-out time.

    Returns:
        Decimal: Hours worked rounded half-up to one decimal.

    Raises:
        ValidationError: If either time cannot be parsed.
        InvalidTimeRangeError: If the corrected duration is negative.
    """
    start = minutes_since_midnight(parse_clock_time(time_in, "time_in"))
    end = minutes_since_midnight(parse_clock_time(time_out, "time_out"))
    if end < start:
        end += MINUTES_PER_DAY
    duration = end - start
    if duration < 0:
        raise InvalidTimeRangeError(time_in, time_out)
    return round_half_up(Decimal(duration) / Decimal(60))


__all__ = ["compute_hours", "minutes_since_midnight", "parse_clock_time"]
