"""Table definitions for the hosted finance database."""

from sqlalchemy import text

from paytrack.application.ports.database import DatabaseEnginePort
from paytrack.infrastructure.logging.logger import get_app_logger

CREATE_PROFILES_SQL = """
CREATE TABLE IF NOT EXISTS profiles (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    currency_symbol TEXT DEFAULT '$',
    theme_preference TEXT DEFAULT 'dark',
    created_at TIMESTAMPTZ DEFAULT now()
)
"""

CREATE_TIMESHEETS_SQL = """
CREATE TABLE IF NOT EXISTS timesheets (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL,
    job_name TEXT NOT NULL,
    hours_worked NUMERIC(6, 1) NOT NULL CHECK (hours_worked >= 0),
    hourly_pay NUMERIC(12, 2) NOT NULL CHECK (hourly_pay >= 0),
    work_date DATE NOT NULL DEFAULT CURRENT_DATE,
    day_of_week TEXT NOT NULL,
    time_from TIME,
    time_to TIME,
    is_paid BOOLEAN NOT NULL DEFAULT FALSE,
    paid_date DATE,
    created_at TIMESTAMPTZ DEFAULT now(),
    CHECK (is_paid = (paid_date IS NOT NULL))
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL,
    expense_name TEXT NOT NULL,
    category TEXT NOT NULL DEFAULT 'other',
    amount NUMERIC(12, 2) NOT NULL CHECK (amount > 0),
    date_time TIMESTAMP NOT NULL DEFAULT now(),
    payment_method TEXT NOT NULL DEFAULT 'debit',
    notes TEXT,
    created_at TIMESTAMPTZ DEFAULT now()
)
"""

CREATE_BANK_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS bank_accounts (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL,
    bank_name TEXT NOT NULL,
    account_type TEXT NOT NULL DEFAULT 'checking',
    current_balance NUMERIC(14, 2) NOT NULL DEFAULT 0,
    created_at TIMESTAMPTZ DEFAULT now()
)
"""

CREATE_CASH_ACCOUNT_SQL = """
CREATE TABLE IF NOT EXISTS cash_account (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL UNIQUE,
    current_balance NUMERIC(14, 2) NOT NULL DEFAULT 0,
    updated_at TIMESTAMPTZ DEFAULT now()
)
"""

CREATE_DEBTS_SQL = """
CREATE TABLE IF NOT EXISTS debts (
    id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
    user_id TEXT NOT NULL,
    debt_name TEXT NOT NULL,
    debt_type TEXT NOT NULL DEFAULT 'credit_card',
    current_amount NUMERIC(14, 2) NOT NULL DEFAULT 0
        CHECK (current_amount >= 0),
    updated_at TIMESTAMPTZ DEFAULT now()
)
"""

CREATE_TABLES_SQL = (
    CREATE_PROFILES_SQL,
    CREATE_TIMESHEETS_SQL,
    CREATE_EXPENSES_SQL,
    CREATE_BANK_ACCOUNTS_SQL,
    CREATE_CASH_ACCOUNT_SQL,
    CREATE_DEBTS_SQL,
)

FINANCE_TABLES = (
    "profiles",
    "timesheets",
    "expenses",
    "bank_accounts",
    "cash_account",
    "debts",
)

LIST_TABLES_SQL = text(
    """
    SELECT table_name
    FROM information_schema.tables
    WHERE table_schema = current_schema()
    """
)


def ensure_schema(db_port: DatabaseEnginePort, logger=None) -> int:
    """Create every finance table that does not exist yet.

    Args:
        db_port: Port providing access to the finance engine.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        int: Number of CREATE statements executed.
    """
    resolved_logger = logger or get_app_logger()
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in CREATE_TABLES_SQL:
            conn.exec_driver_sql(statement)
    resolved_logger.info(f"Ensured {len(CREATE_TABLES_SQL)} finance tables")
    return len(CREATE_TABLES_SQL)


def missing_tables(db_port: DatabaseEnginePort) -> list[str]:
    """Return the finance tables absent from the current schema."""
    engine = db_port.get_engine()
    with engine.connect() as conn:
        existing = {row.table_name for row in conn.execute(LIST_TABLES_SQL)}
    return [name for name in FINANCE_TABLES if name not in existing]


__all__ = [
    "CREATE_TABLES_SQL",
    "FINANCE_TABLES",
    "ensure_schema",
    "missing_tables",
]
