"""Demo account generator."""

from collections.abc import Container
from decimal import Decimal
from typing import Iterator

from bank_sim.generators.base import BaseGenerator
from bank_sim.models import AccountKind, BankAccount, open_account
from bank_sim.models.account import CENTS


class AccountGenerator(BaseGenerator):
    """Generate random demo accounts.

    Mix of account kinds:
    - BASIC: ~50%
    - SAVINGS: ~30%
    - CHECKING: ~20%
    """

    ACCOUNT_KINDS = list(AccountKind)
    ACCOUNT_KIND_WEIGHTS = [0.50, 0.30, 0.20]

    INTEREST_RATES = ["0.5", "1", "1.5", "2", "3.5", "5"]
    CREDIT_LIMITS = ["250", "500", "1000", "2500", "5000"]

    MAX_BALANCE = 20000

    def generate(self, kind: AccountKind | None = None) -> BankAccount:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Kind of account to generate; random when omitted.

        Returns
        -------
        BankAccount
            Generated account with zero cash on hand.
        """
        if kind is None:
            kind = self.random.choices(
                self.ACCOUNT_KINDS, weights=self.ACCOUNT_KIND_WEIGHTS, k=1
            )[0]

        cents = self.fake.pyint(min_value=0, max_value=self.MAX_BALANCE * 100)
        balance = (Decimal(cents) / 100).quantize(CENTS)

        parameter = None
        if kind == AccountKind.SAVINGS:
            parameter = Decimal(self.random.choice(self.INTEREST_RATES))
        elif kind == AccountKind.CHECKING:
            parameter = Decimal(self.random.choice(self.CREDIT_LIMITS))

        return open_account(kind, self.fake.numerify("#########"), balance, parameter)

    def generate_unique(
        self, count: int, existing: Container[str] = ()
    ) -> Iterator[BankAccount]:
        """Generate ``count`` accounts whose numbers are not in ``existing``."""
        seen: set[str] = set()
        produced = 0
        while produced < count:
            account = self.generate()
            number = account.account_number
            if number in seen or number in existing:
                continue
            seen.add(number)
            produced += 1
            yield account
