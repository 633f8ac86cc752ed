"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from paytrack.infrastructure import settings as settings_module
from paytrack.infrastructure.settings import FinanceSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "FINANCE_USER_ID",
        "FINANCE_CURRENCY_SYMBOL",
        "FINANCE_RECENT_LIMIT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_environment_is_empty():
    """Missing variables should fall back to defaults."""
    settings = FinanceSettings.from_env()

    assert settings == FinanceSettings(
        user_id=None,
        currency_symbol="$",
        recent_expenses_limit=5,
    )


def test_reads_configured_values(monkeypatch):
    """Configured values should be stripped and parsed."""
    monkeypatch.setenv("FINANCE_USER_ID", " user-1 ")
    monkeypatch.setenv("FINANCE_CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("FINANCE_RECENT_LIMIT", "8")

    settings = FinanceSettings.from_env()

    assert settings.user_id == "user-1"
    assert settings.currency_symbol == "€"
    assert settings.recent_expenses_limit == 8


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_invalid_recent_limit_falls_back(raw):
    """Invalid limits should warn and use the default."""
    logger = MagicMock()

    value = FinanceSettings._parse_positive_int(raw, 5, logger=logger)

    assert value == 5
    logger.warning.assert_called_once()
