"""Domain constants and closed enumerations."""

from enum import Enum


class LabeledEnum(str, Enum):
    """String-valued enum whose members carry a display label."""

    def __new__(cls, value: str, label: str):
        member = str.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    def __str__(self) -> str:
        return self.value


class ExpenseCategory(LabeledEnum):
    """Fixed set of expense categories."""

    RENT = ("rent", "Rent")
    UTILITIES = ("utilities", "Utilities")
    GROCERY = ("grocery", "Grocery")
    FAST_FOOD = ("fast_food", "Fast Food")
    TRANSPORT = ("transport", "Transport")
    CREDIT_CARD = ("credit_card", "Credit Card")
    ENTERTAINMENT = ("entertainment", "Entertainment")
    HEALTHCARE = ("healthcare", "Healthcare")
    SHOPPING = ("shopping", "Shopping")
    OTHER = ("other", "Other")


class PaymentMethod(LabeledEnum):
    """Fixed set of payment methods."""

    CREDIT = ("credit", "Credit")
    DEBIT = ("debit", "Debit")
    CASH = ("cash", "Cash")
    BANK_TRANSFER = ("bank_transfer", "Bank Transfer")
    OTHER = ("other", "Other")


class AccountType(LabeledEnum):
    """Fixed set of bank account types."""

    CHECKING = ("checking", "Checking")
    SAVINGS = ("savings", "Savings")
    BOTH = ("both", "Both")


class DebtType(LabeledEnum):
    """Fixed set of debt types."""

    CREDIT_CARD = ("credit_card", "Credit Card")
    STUDENT_LOAN = ("student_loan", "Student Loan")
    PERSONAL_LOAN = ("personal_loan", "Personal Loan")
    MORTGAGE = ("mortgage", "Mortgage")
    OTHER = ("other", "Other")


MINUTES_PER_DAY = 24 * 60

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_RECENT_EXPENSES_LIMIT = 5


__all__ = [
    "LabeledEnum",
    "ExpenseCategory",
    "PaymentMethod",
    "AccountType",
    "DebtType",
    "MINUTES_PER_DAY",
    "WEEKDAY_NAMES",
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_RECENT_EXPENSES_LIMIT",
]
