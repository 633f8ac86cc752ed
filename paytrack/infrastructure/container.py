"""Composition root for wiring infrastructure adapters."""

from paytrack.application.ports.accounts_repository import (
    AccountsRepositoryPort,
)
from paytrack.application.ports.database import DatabaseEnginePort
from paytrack.application.ports.debts_repository import DebtsRepositoryPort
from paytrack.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
)
from paytrack.application.ports.profiles_repository import (
    ProfilesRepositoryPort,
)
from paytrack.application.ports.timesheets_repository import (
    TimesheetsRepositoryPort,
)
from paytrack.infrastructure.accounts_repository import (
    SqlAlchemyAccountsRepository,
)
from paytrack.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from paytrack.infrastructure.debts_repository import SqlAlchemyDebtsRepository
from paytrack.infrastructure.expenses_repository import (
    SqlAlchemyExpensesRepository,
)
from paytrack.infrastructure.logging.logger import get_app_logger
from paytrack.infrastructure.profiles_repository import (
    SqlAlchemyProfilesRepository,
)
from paytrack.infrastructure.settings import FinanceSettings
from paytrack.infrastructure.timesheets_repository import (
    SqlAlchemyTimesheetsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def resolve_user_id(user_id: str | None = None) -> str:
    """Return the given user id or the configured one.

    Raises:
        RuntimeError: If no user id is available.
    """
    resolved = user_id or FinanceSettings.from_env().user_id
    if not resolved:
        raise RuntimeError("Missing environment variable: FINANCE_USER_ID")
    return resolved


def build_timesheets_repository(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> TimesheetsRepositoryPort:
    """Return the timesheets repository for the current user."""
    return SqlAlchemyTimesheetsRepository(
        db_port or build_database_adapter(),
        resolve_user_id(user_id),
        logger=get_app_logger(),
    )


def build_expenses_repository(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> ExpensesRepositoryPort:
    """Return the expenses repository for the current user."""
    return SqlAlchemyExpensesRepository(
        db_port or build_database_adapter(),
        resolve_user_id(user_id),
        logger=get_app_logger(),
    )


def build_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> AccountsRepositoryPort:
    """Return the bank and cash accounts repository."""
    return SqlAlchemyAccountsRepository(
        db_port or build_database_adapter(),
        resolve_user_id(user_id),
        logger=get_app_logger(),
    )


def build_debts_repository(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> DebtsRepositoryPort:
    """Return the debts repository for the current user."""
    return SqlAlchemyDebtsRepository(
        db_port or build_database_adapter(),
        resolve_user_id(user_id),
        logger=get_app_logger(),
    )


def build_profiles_repository(
    db_port: DatabaseEnginePort | None = None,
    user_id: str | None = None,
) -> ProfilesRepositoryPort:
    """Return the profile repository for the current user."""
    return SqlAlchemyProfilesRepository(
        db_port or build_database_adapter(),
        resolve_user_id(user_id),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "resolve_user_id",
    "build_timesheets_repository",
    "build_expenses_repository",
    "build_accounts_repository",
    "build_debts_repository",
    "build_profiles_repository",
]
