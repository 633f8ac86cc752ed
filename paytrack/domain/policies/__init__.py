"""Domain policies package."""

from .paid_status import (
    mark_paid,
    mark_unpaid,
    paid_status_patch,
    toggle_paid,
)

__all__ = ["mark_paid", "mark_unpaid", "paid_status_patch", "toggle_paid"]
