"""Account models: basic, savings and checking accounts.

Every mutating operation returns an :class:`Outcome` describing what
happened instead of printing it, so the shell decides how to show it.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar

from bank_sim.exceptions import InvalidArgumentError
from bank_sim.models.enums import AccountKind, Operation, OutcomeStatus

ZERO = Decimal("0")
CENTS = Decimal("0.01")

ACCOUNT_NUMBER_WIDTH = 9

# Amounts with more integer digits than this are rejected as input.
MAX_AMOUNT_DIGITS = 15


def format_account_number(raw: str) -> str:
    """Return the canonical ``XXX-XXX-XXX`` form of an account number.

    Surrounding whitespace and dashes are stripped, the digits are
    left-padded with zeros to nine characters and dashes are inserted
    after the third and sixth characters. Anything beyond nine
    characters stays in the last group.
    """
    digits = str(raw).strip().replace("-", "").rjust(ACCOUNT_NUMBER_WIDTH, "0")
    return f"{digits[:3]}-{digits[3:6]}-{digits[6:]}"


def is_valid_account_number(raw: Any) -> bool:
    """Return True for a non-empty string of ASCII digits, dashes allowed."""
    if not isinstance(raw, str):
        return False
    digits = raw.strip().replace("-", "")
    return digits.isascii() and digits.isdecimal()


def to_decimal(value: Any) -> Decimal:
    """Convert int, str, float or Decimal input to a finite Decimal.

    Values with more than ``MAX_AMOUNT_DIGITS`` integer digits are
    rejected.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Not a valid amount: {value!r}")
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"Not a valid amount: {value!r}") from exc
    if not value.is_finite():
        raise InvalidArgumentError(f"Not a valid amount: {value!r}")
    if value and value.adjusted() >= MAX_AMOUNT_DIGITS:
        raise InvalidArgumentError(f"Amount out of range: {value!r}")
    return value


@dataclass
class Outcome:
    """Result of a single account operation."""

    operation: Operation
    status: OutcomeStatus
    amount: Decimal
    balance: Decimal
    cash_on_hand: Decimal
    cash_used: Decimal = ZERO
    external_funds: Decimal = ZERO
    debt_paid: Decimal = ZERO
    interest: Decimal = ZERO

    @property
    def ok(self) -> bool:
        return self.status == OutcomeStatus.COMPLETED


@dataclass
class BankAccount:
    """Basic bank account.

    ``balance`` is the money held by the bank, ``cash_on_hand`` is the
    physical cash of the owner. Deposits draw from cash on hand first,
    withdrawals turn balance back into cash.
    """

    kind: ClassVar[AccountKind] = AccountKind.BASIC
    insufficient_status: ClassVar[OutcomeStatus] = OutcomeStatus.INSUFFICIENT_FUNDS

    account_number: str
    balance: Decimal
    cash_on_hand: Decimal = field(default=ZERO, init=False)

    def __post_init__(self) -> None:
        self.account_number = format_account_number(self.account_number)
        self.balance = to_decimal(self.balance)
        if self.balance < 0:
            raise InvalidArgumentError("Initial balance cannot be negative")

    @classmethod
    def restore(
        cls,
        account_number: str,
        balance: Any,
        cash_on_hand: Any,
        **params: Any,
    ) -> "BankAccount":
        """Rebuild a saved account, which may already be overdrawn."""
        if not is_valid_account_number(account_number):
            raise InvalidArgumentError(f"Invalid account number {account_number!r}")
        account = cls(account_number, ZERO, **params)
        account.balance = to_decimal(balance)
        cash = to_decimal(cash_on_hand)
        if cash < 0:
            raise InvalidArgumentError("Cash on hand cannot be negative")
        account.cash_on_hand = cash
        return account

    @property
    def account_type(self) -> str:
        return self.kind.label

    def available_funds(self) -> Decimal:
        """Largest amount that can be withdrawn right now."""
        return self.balance

    def deposit(self, amount: Any) -> Outcome:
        """Deposit ``amount``, taking it from cash on hand first.

        When cash on hand does not cover the deposit, the remainder comes
        from external funds. If the balance is still negative afterwards,
        up to ``amount`` is applied once more to pay off the debt.
        """
        amount = to_decimal(amount)
        if amount <= 0:
            return self._outcome(Operation.DEPOSIT, OutcomeStatus.INVALID_AMOUNT, amount)

        if amount <= self.cash_on_hand:
            cash_used = amount
            self.cash_on_hand -= amount
            self.balance += amount
        else:
            cash_used = self.cash_on_hand
            self.balance += cash_used
            self.cash_on_hand = ZERO
            self.balance += amount - cash_used

        debt_paid = ZERO
        if self.balance < 0:
            debt_paid = min(-self.balance, amount)
            self.balance += debt_paid

        return self._outcome(
            Operation.DEPOSIT,
            OutcomeStatus.COMPLETED,
            amount,
            cash_used=cash_used,
            external_funds=amount - cash_used,
            debt_paid=debt_paid,
        )

    def withdraw(self, amount: Any) -> Outcome:
        """Withdraw ``amount`` into cash on hand."""
        amount = to_decimal(amount)
        if amount <= 0:
            return self._outcome(Operation.WITHDRAW, OutcomeStatus.INVALID_AMOUNT, amount)
        if amount > self.available_funds():
            return self._outcome(Operation.WITHDRAW, self.insufficient_status, amount)

        self.balance -= amount
        self.cash_on_hand += amount
        return self._outcome(Operation.WITHDRAW, OutcomeStatus.COMPLETED, amount)

    def describe(self) -> str:
        """Return a one-line summary of the account."""
        return (
            f"Type: {self.account_type}, Number: {self.account_number}, "
            f"Balance: {self.balance:.2f}, Cash on hand: {self.cash_on_hand:.2f}"
        )

    def __str__(self) -> str:
        return self.describe()

    def _outcome(
        self,
        operation: Operation,
        status: OutcomeStatus,
        amount: Decimal,
        **details: Decimal,
    ) -> Outcome:
        return Outcome(
            operation=operation,
            status=status,
            amount=amount,
            balance=self.balance,
            cash_on_hand=self.cash_on_hand,
            **details,
        )


@dataclass
class SavingsAccount(BankAccount):
    """Savings account that accrues interest after every deposit and withdrawal."""

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS

    interest_rate: Decimal = ZERO  # percent

    def __post_init__(self) -> None:
        super().__post_init__()
        self.interest_rate = to_decimal(self.interest_rate)
        if self.interest_rate < 0:
            raise InvalidArgumentError("Interest rate cannot be negative")

    def deposit(self, amount: Any) -> Outcome:
        return self._with_interest(super().deposit(amount))

    def withdraw(self, amount: Any) -> Outcome:
        return self._with_interest(super().withdraw(amount))

    def apply_interest(self) -> Outcome:
        """Accrue interest on a positive balance."""
        interest = self._accrue_interest()
        return self._outcome(
            Operation.INTEREST, OutcomeStatus.COMPLETED, interest, interest=interest
        )

    def describe(self) -> str:
        return f"{super().describe()}, Interest rate: {self.interest_rate}%"

    def _accrue_interest(self) -> Decimal:
        if self.balance <= 0:
            return ZERO
        interest = self.balance * self.interest_rate / 100
        self.balance += interest
        return interest

    def _with_interest(self, outcome: Outcome) -> Outcome:
        # Interest accrues even when the operation itself was rejected.
        interest = self._accrue_interest()
        return replace(outcome, interest=interest, balance=self.balance)


@dataclass
class CheckingAccount(BankAccount):
    """Checking account whose balance may drop to ``-credit_limit``."""

    kind: ClassVar[AccountKind] = AccountKind.CHECKING
    insufficient_status: ClassVar[OutcomeStatus] = OutcomeStatus.CREDIT_LIMIT_EXCEEDED

    credit_limit: Decimal = ZERO

    def __post_init__(self) -> None:
        super().__post_init__()
        self.credit_limit = to_decimal(self.credit_limit)
        if self.credit_limit < 0:
            raise InvalidArgumentError("Credit limit cannot be negative")

    def available_funds(self) -> Decimal:
        return self.balance + self.credit_limit

    def set_credit_limit(self, limit: Any) -> Outcome:
        """Replace the credit limit. The new floor applies from the next withdrawal."""
        limit = to_decimal(limit)
        if limit < 0:
            return self._outcome(Operation.CREDIT_LIMIT, OutcomeStatus.INVALID_AMOUNT, limit)
        self.credit_limit = limit
        return self._outcome(Operation.CREDIT_LIMIT, OutcomeStatus.COMPLETED, limit)

    def describe(self) -> str:
        return f"{super().describe()}, Credit limit: {self.credit_limit:.2f}"


ACCOUNT_CLASSES: dict[AccountKind, type[BankAccount]] = {
    AccountKind.BASIC: BankAccount,
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
}


def open_account(
    kind: AccountKind,
    account_number: str,
    balance: Any,
    parameter: Any = None,
) -> BankAccount:
    """Create an account of the given kind.

    ``parameter`` is the interest rate for savings accounts and the
    credit limit for checking accounts; it is ignored for basic ones.
    """
    if kind == AccountKind.SAVINGS:
        return SavingsAccount(account_number, balance, interest_rate=parameter or ZERO)
    if kind == AccountKind.CHECKING:
        return CheckingAccount(account_number, balance, credit_limit=parameter or ZERO)
    return BankAccount(account_number, balance)
