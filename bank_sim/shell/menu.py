"""Menu-driven interactive shell."""

import logging
from collections.abc import Callable
from decimal import Decimal

from bank_sim.exceptions import DuplicateAccountError, InvalidArgumentError
from bank_sim.models import (
    AccountKind,
    BankAccount,
    CheckingAccount,
    SavingsAccount,
    format_account_number,
    is_valid_account_number,
    open_account,
)
from bank_sim.registry import AccountRegistry
from bank_sim.shell.prompts import is_confirmation_declined, parse_amount, parse_choice
from bank_sim.shell.render import render_accounts, render_outcome
from bank_sim.storage import JsonFileStore

logger = logging.getLogger(__name__)

MAIN_MENU = {
    "1": "Create account",
    "2": "Manage account",
    "3": "List accounts",
    "4": "Save and manage accounts",
    "5": "Exit",
}

KIND_MENU = {
    "1": AccountKind.BASIC,
    "2": AccountKind.SAVINGS,
    "3": AccountKind.CHECKING,
}

SAVE_MENU = {
    "1": "Save accounts",
    "2": "Remove account",
}

INVALID_CHOICE = "Invalid choice."
INVALID_AMOUNT = "Invalid amount."
NOT_FOUND = "Account not found."


class BankShell:
    """Interactive command loop over an account registry.

    Parameters
    ----------
    registry : AccountRegistry
        Accounts manipulated by the session.
    store : JsonFileStore
        Store used by the save command.
    input_func : Callable[[str], str]
        Reads one line after showing a prompt (default ``input``).
    output_func : Callable[[str], None]
        Writes one line (default ``print``).
    """

    def __init__(
        self,
        registry: AccountRegistry,
        store: JsonFileStore,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self.registry = registry
        self.store = store
        self._input = input_func or input
        self._output = output_func or print
        self.saved = True

    def run(self) -> None:
        """Run the main menu until the operator exits or input ends."""
        handlers = {
            "1": self.create_account,
            "2": self.manage_account,
            "3": self.list_accounts,
            "4": self.save_and_manage,
        }
        while True:
            try:
                self._say("")
                self._say("Main menu:")
                self._show_options(MAIN_MENU)
                choice = parse_choice(self._input(""), MAIN_MENU)
                if choice is None:
                    self._say(INVALID_CHOICE)
                elif choice == "5":
                    if self.confirm_exit():
                        return
                else:
                    handlers[choice]()
            except EOFError:
                logger.info("Input closed, leaving shell")
                return

    def create_account(self) -> None:
        self._say("Choose account type:")
        self._show_options({key: kind.label for key, kind in KIND_MENU.items()})
        key = parse_choice(self._input(""), KIND_MENU)
        if key is None:
            self._say(INVALID_CHOICE)
            return
        kind = KIND_MENU[key]

        number = self._read_account_number("Enter account number (e.g. 123456789): ")
        if number is None:
            return
        balance = self._read_amount("Enter initial balance: ")
        if balance is None:
            return

        parameter = None
        if kind == AccountKind.SAVINGS:
            parameter = self._read_amount("Enter interest rate (%): ")
            if parameter is None:
                return
        elif kind == AccountKind.CHECKING:
            parameter = self._read_amount("Enter credit limit: ")
            if parameter is None:
                return

        try:
            account = open_account(kind, number, balance, parameter)
            self.registry.add(account)
        except (InvalidArgumentError, DuplicateAccountError) as exc:
            self._say(str(exc))
            return

        self._say(f"Account created. {account.describe()}")
        self.saved = False

    def manage_account(self) -> None:
        account = self._find_account("Enter account number: ")
        if account is None:
            return

        options = {"1": "Deposit", "2": "Withdraw"}
        if isinstance(account, SavingsAccount):
            options["3"] = "Apply interest"
        if isinstance(account, CheckingAccount):
            options["4"] = "Set credit limit"

        self._say("")
        self._say("Account actions:")
        self._show_options(options)
        choice = parse_choice(self._input(""), options)

        if choice == "1":
            amount = self._read_amount("Enter deposit amount: ")
            if amount is None:
                return
            outcome = account.deposit(amount)
        elif choice == "2":
            amount = self._read_amount("Enter withdrawal amount: ")
            if amount is None:
                return
            outcome = account.withdraw(amount)
        elif choice == "3" and isinstance(account, SavingsAccount):
            outcome = account.apply_interest()
        elif choice == "4" and isinstance(account, CheckingAccount):
            limit = self._read_amount("Enter new credit limit: ")
            if limit is None:
                return
            outcome = account.set_credit_limit(limit)
        else:
            self._say(INVALID_CHOICE)
            return

        logger.debug(
            "%s on %s: %s", outcome.operation.value, account.account_number, outcome.status.value
        )
        for line in render_outcome(outcome):
            self._say(line)
        self.saved = False

    def list_accounts(self) -> None:
        for line in render_accounts(self.registry.list_all()):
            self._say(line)

    def save_and_manage(self) -> None:
        self._say("")
        self._say("Save and manage accounts:")
        self._show_options(SAVE_MENU)
        choice = parse_choice(self._input(""), SAVE_MENU)

        if choice == "1":
            self.save()
        elif choice == "2":
            number = self._read_account_number("Enter account number to remove: ")
            if number is None:
                return
            if self.registry.remove(number) is None:
                self._say(NOT_FOUND)
                return
            self._say("Account removed.")
            self.saved = False
        else:
            self._say(INVALID_CHOICE)

    def save(self) -> None:
        result = self.store.save(self.registry)
        self._say(result.message)
        if result.ok:
            self.saved = True

    def confirm_exit(self) -> bool:
        """Return True when the session may end."""
        if self.saved:
            return True
        answer = self._input("Accounts are not saved. Exit anyway? (y/n): ")
        return not is_confirmation_declined(answer)

    def _find_account(self, prompt: str) -> BankAccount | None:
        number = self._read_account_number(prompt)
        if number is None:
            return None
        account = self.registry.find(number)
        if account is None:
            self._say(NOT_FOUND)
        return account

    def _read_account_number(self, prompt: str) -> str | None:
        raw = self._input(prompt).strip()
        if not is_valid_account_number(raw):
            self._say("Account number must contain digits only.")
            return None
        return format_account_number(raw)

    def _read_amount(self, prompt: str) -> Decimal | None:
        amount = parse_amount(self._input(prompt))
        if amount is None:
            self._say(INVALID_AMOUNT)
        return amount

    def _show_options(self, options: dict) -> None:
        for key, label in options.items():
            self._say(f"{key}. {label}")

    def _say(self, line: str) -> None:
        self._output(line)
