"""Account domain models."""

from bank_sim.models.account import (
    ACCOUNT_CLASSES,
    BankAccount,
    CheckingAccount,
    Outcome,
    SavingsAccount,
    format_account_number,
    is_valid_account_number,
    open_account,
    to_decimal,
)
from bank_sim.models.enums import AccountKind, Operation, OutcomeStatus

__all__ = [
    "ACCOUNT_CLASSES",
    "AccountKind",
    "BankAccount",
    "CheckingAccount",
    "Operation",
    "Outcome",
    "OutcomeStatus",
    "SavingsAccount",
    "format_account_number",
    "is_valid_account_number",
    "open_account",
    "to_decimal",
]
