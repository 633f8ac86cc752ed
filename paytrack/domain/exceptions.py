"""Domain and gateway error types."""


class ValidationError(ValueError):
    """Raised when user input is rejected before reaching the database."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidTimeRangeError(ValidationError):
    """Raised when a time-in/time-out pair yields a negative duration."""

    def __init__(self, time_in, time_out) -> None:
        super().__init__(
            f"Invalid time range: {time_in} to {time_out} "
            "produces a negative duration",
            field="time_out",
        )
        self.time_in = time_in
        self.time_out = time_out


class GatewayError(RuntimeError):
    """Raised when the hosted database rejects or fails a call."""


class RecordNotFoundError(GatewayError):
    """Raised when a row does not exist for the current user."""


__all__ = [
    "ValidationError",
    "InvalidTimeRangeError",
    "GatewayError",
    "RecordNotFoundError",
]
