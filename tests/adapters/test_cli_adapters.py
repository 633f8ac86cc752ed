"""Tests for the command-line adapters."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from paytrack.adapters import check_db_connection
from paytrack.adapters import init_schema_cli
from paytrack.adapters import monthly_report_cli
from paytrack.application.use_cases.get_dashboard_summary import (
    DashboardView,
)
from paytrack.domain.constants import ExpenseCategory
from paytrack.domain.models import (
    DashboardSummary,
    EarningsSummary,
    ExpenseBreakdown,
)


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


class _Adapter:
    def __init__(self) -> None:
        self.engine = _DummyEngine("postgresql://finance")

    def get_engine(self):
        return self.engine


def test_check_db_connection_reports_success(monkeypatch):
    """The CLI should run SELECT 1 and return 0 when tables exist."""
    adapter = _Adapter()
    logger = MagicMock()
    monkeypatch.setattr(
        check_db_connection,
        "build_database_adapter",
        lambda: adapter,
    )
    monkeypatch.setattr(check_db_connection, "get_app_logger", lambda: logger)
    monkeypatch.setattr(check_db_connection, "missing_tables", lambda _: [])

    assert check_db_connection.main() == 0
    assert adapter.engine.connection.executed == ["SELECT 1"]
    assert "postgresql://finance" in logger.info.call_args_list[0].args[0]


def test_check_db_connection_warns_about_missing_tables(monkeypatch):
    """Missing tables should produce a warning and exit code 1."""
    logger = MagicMock()
    monkeypatch.setattr(
        check_db_connection,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(check_db_connection, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        check_db_connection,
        "missing_tables",
        lambda _: ["debts"],
    )

    assert check_db_connection.main() == 1
    assert "debts" in logger.warning.call_args.args[0]


def test_init_schema_cli_prints_count(monkeypatch, capsys):
    """The schema CLI should report how many tables were ensured."""
    monkeypatch.setattr(init_schema_cli, "build_database_adapter", object)
    monkeypatch.setattr(init_schema_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(
        init_schema_cli,
        "ensure_schema",
        lambda db_port, logger=None: 6,
    )

    init_schema_cli.main()

    assert "Ensured 6 tables" in capsys.readouterr().out


def _view() -> DashboardView:
    return DashboardView(
        summary=DashboardSummary(
            total_balance=Decimal("1050"),
            monthly_earnings=Decimal("135"),
            monthly_expenses=Decimal("100"),
            net_savings=Decimal("35"),
            savings_rate=26,
        ),
        earnings=EarningsSummary(
            total_hours=Decimal("8"),
            total_earnings=Decimal("135"),
            paid_hours=Decimal("3"),
            paid_earnings=Decimal("60"),
            unpaid_hours=Decimal("5"),
            unpaid_earnings=Decimal("75"),
        ),
        breakdown=ExpenseBreakdown(
            totals={
                ExpenseCategory.GROCERY: Decimal("80"),
                ExpenseCategory.TRANSPORT: Decimal("20"),
            },
            grand_total=Decimal("100"),
        ),
        period_start=date(2024, 5, 1),
        period_end=date(2024, 5, 31),
    )


def test_format_report_lines():
    """The report should show totals, savings and categories."""
    lines = monthly_report_cli.format_report(_view(), "$")

    assert lines[0] == "Monthly report (2024-05-01 to 2024-05-31)"
    assert "Hours worked: 8.0h (5.0h unpaid)" in lines
    assert "Net savings: $35.00 (26%)" in lines
    assert "  Grocery: $80.00" in lines
    assert "  Transport: $20.00" in lines


def test_parse_date_warns_on_invalid_value():
    """Invalid REPORT_MONTH values should be ignored with a warning."""
    logger = MagicMock()

    assert monthly_report_cli._parse_date("2024-13-01", logger) is None
    assert monthly_report_cli._parse_date(None, logger) is None
    assert monthly_report_cli._parse_date("2024-05-09", logger) == date(
        2024,
        5,
        9,
    )
    logger.warning.assert_called_once()
