"""Application ports package."""

from .accounts_repository import AccountsRepositoryPort
from .database import DatabaseEnginePort
from .debts_repository import DebtsRepositoryPort
from .expenses_repository import ExpensesRepositoryPort
from .profiles_repository import ProfilesRepositoryPort
from .timesheets_repository import TimesheetsRepositoryPort

__all__ = [
    "AccountsRepositoryPort",
    "DatabaseEnginePort",
    "DebtsRepositoryPort",
    "ExpensesRepositoryPort",
    "ProfilesRepositoryPort",
    "TimesheetsRepositoryPort",
]
