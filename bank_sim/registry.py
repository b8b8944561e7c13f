"""In-memory account registry keyed by canonical account number."""

import logging
from collections.abc import Iterator, ValuesView
from dataclasses import dataclass, field

from bank_sim.exceptions import AccountNotFoundError, DuplicateAccountError
from bank_sim.models import AccountKind, BankAccount, format_account_number

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistry:
    """Ordered collection of accounts that owns every account it holds.

    Insertion order is preserved and account numbers are unique.
    """

    _accounts: dict[str, BankAccount] = field(default_factory=dict)

    def add(self, account: BankAccount) -> None:
        """Add an account to the registry."""
        if account.account_number in self._accounts:
            raise DuplicateAccountError(f"Account {account.account_number} already exists")

        self._accounts[account.account_number] = account
        logger.info("Added %s %s", account.kind.value, account.account_number)

    def find(self, number: str) -> BankAccount | None:
        """Return the account with the given number, or None."""
        return self._accounts.get(format_account_number(number))

    def get(self, number: str) -> BankAccount:
        """Return the account with the given number or raise AccountNotFoundError."""
        account = self.find(number)
        if account is None:
            raise AccountNotFoundError(f"Account {format_account_number(number)} not found")
        return account

    def remove(self, number: str) -> BankAccount | None:
        """Remove and return the account with the given number, or None."""
        account = self._accounts.pop(format_account_number(number), None)
        if account is not None:
            logger.info("Removed %s %s", account.kind.value, account.account_number)
        return account

    def list_all(self) -> ValuesView[BankAccount]:
        """Return a live view of all accounts in insertion order."""
        return self._accounts.values()

    def summary(self) -> dict[str, int]:
        """Return account counts per kind."""
        counts = {kind.value: 0 for kind in AccountKind}
        for account in self._accounts.values():
            counts[account.kind.value] += 1
        return counts

    def __iter__(self) -> Iterator[BankAccount]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, number: object) -> bool:
        if not isinstance(number, str):
            return False
        return format_account_number(number) in self._accounts
