"""Tests for the schema helpers and the composition root."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from paytrack.infrastructure import container
from paytrack.infrastructure import schema
from paytrack.infrastructure.settings import FinanceSettings
from paytrack.infrastructure.timesheets_repository import (
    SqlAlchemyTimesheetsRepository,
)


def _db_port():
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    context.__exit__.return_value = False
    engine.begin.return_value = context
    engine.connect.return_value = context
    db_port = MagicMock()
    db_port.get_engine.return_value = engine
    return db_port, engine, conn


def test_ensure_schema_creates_every_table_in_one_transaction():
    """All CREATE statements should run inside a single begin()."""
    db_port, engine, conn = _db_port()

    executed = schema.ensure_schema(db_port, logger=MagicMock())

    assert executed == len(schema.FINANCE_TABLES)
    engine.begin.assert_called_once()
    statements = [call.args[0] for call in conn.exec_driver_sql.call_args_list]
    for table in schema.FINANCE_TABLES:
        assert any(
            f"CREATE TABLE IF NOT EXISTS {table} " in statement
            for statement in statements
        )


def test_missing_tables_lists_absent_tables():
    """Tables not reported by the database should be returned in order."""
    db_port, _, conn = _db_port()
    conn.execute.return_value = [
        SimpleNamespace(table_name="profiles"),
        SimpleNamespace(table_name="expenses"),
    ]

    missing = schema.missing_tables(db_port)

    assert missing == ["timesheets", "bank_accounts", "cash_account", "debts"]


def test_resolve_user_id_prefers_explicit_value(monkeypatch):
    """An explicit user id should win over the settings."""
    monkeypatch.setattr(
        container.FinanceSettings,
        "from_env",
        classmethod(lambda cls: FinanceSettings(user_id="from-env")),
    )

    assert container.resolve_user_id("explicit") == "explicit"
    assert container.resolve_user_id() == "from-env"


def test_resolve_user_id_raises_when_unconfigured(monkeypatch):
    """A missing user id should name the variable."""
    monkeypatch.setattr(
        container.FinanceSettings,
        "from_env",
        classmethod(lambda cls: FinanceSettings()),
    )

    with pytest.raises(RuntimeError, match="FINANCE_USER_ID"):
        container.resolve_user_id()


def test_build_timesheets_repository_wires_adapter(monkeypatch):
    """Factories should bind the adapter and the user id."""
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    db_port = MagicMock()

    repository = container.build_timesheets_repository(db_port, "user-1")

    assert isinstance(repository, SqlAlchemyTimesheetsRepository)
    assert repository._db_port is db_port
    assert repository._user_id == "user-1"
