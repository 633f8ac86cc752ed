"""Personal finance tracker: timesheets, expenses, balances and debts."""

__version__ = "0.1.0"
