"""Custom exception hierarchy for bank-sim."""


class BankSimError(Exception):
    """Base exception for all bank-sim errors."""


class InvalidArgumentError(BankSimError, ValueError):
    """Raised when an account is constructed with an invalid value."""


class AccountNotFoundError(BankSimError):
    """Raised when a referenced account does not exist."""


class DuplicateAccountError(BankSimError):
    """Raised when an account number is already registered."""


class PersistenceError(BankSimError):
    """Raised when the accounts file cannot be decoded."""


class ConfigurationError(BankSimError):
    """Raised when configuration is invalid or missing."""
