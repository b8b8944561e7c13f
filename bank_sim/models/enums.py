"""Enumeration types for the account domain."""

from enum import Enum


class AccountKind(str, Enum):
    BASIC = "basic"
    SAVINGS = "savings"
    CHECKING = "checking"

    @property
    def label(self) -> str:
        """Human-readable account type."""
        return _KIND_LABELS[self]


_KIND_LABELS = {
    AccountKind.BASIC: "Basic account",
    AccountKind.SAVINGS: "Savings account",
    AccountKind.CHECKING: "Checking account",
}


class Operation(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    INTEREST = "INTEREST"
    CREDIT_LIMIT = "CREDIT_LIMIT"


class OutcomeStatus(str, Enum):
    COMPLETED = "COMPLETED"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    CREDIT_LIMIT_EXCEEDED = "CREDIT_LIMIT_EXCEEDED"
