"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from paytrack.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_RECENT_EXPENSES_LIMIT,
)
from paytrack.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class FinanceSettings:
    """Settings for the finance tracker.

    Attributes:
        user_id: Identifier of the authenticated user owning the rows.
        currency_symbol: Symbol used when formatting money.
        recent_expenses_limit: Number of expenses on the dashboard.
    """

    user_id: Optional[str] = None
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    recent_expenses_limit: int = DEFAULT_RECENT_EXPENSES_LIMIT

    @classmethod
    def from_env(cls) -> "FinanceSettings":
        """Build settings from environment variables.

        Returns:
            FinanceSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        user_id = (os.getenv("FINANCE_USER_ID") or "").strip() or None
        currency_symbol = (
            os.getenv("FINANCE_CURRENCY_SYMBOL") or ""
        ).strip() or DEFAULT_CURRENCY_SYMBOL
        recent_limit = cls._parse_positive_int(
            os.getenv("FINANCE_RECENT_LIMIT"),
            DEFAULT_RECENT_EXPENSES_LIMIT,
            logger=logger,
        )
        return cls(
            user_id=user_id,
            currency_symbol=currency_symbol,
            recent_expenses_limit=recent_limit,
        )

    @staticmethod
    def _parse_positive_int(
        raw_value: str | None,
        default: int,
        logger,
    ) -> int:
        """Parse a positive integer, falling back to the default.

        Args:
            raw_value: Raw environment value.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        if raw_value is None or not raw_value.strip():
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid FINANCE_RECENT_LIMIT={raw_value!r}; "
                f"using {default}"
            )
            return default
        if value <= 0:
            logger.warning(
                f"FINANCE_RECENT_LIMIT must be positive; using {default}"
            )
            return default
        return value


__all__ = ["FinanceSettings"]
