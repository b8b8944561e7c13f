"""Pytest configuration and fixtures."""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterator

import pytest

from bank_sim.models import BankAccount, CheckingAccount, SavingsAccount
from bank_sim.registry import AccountRegistry
from bank_sim.storage import JsonFileStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def basic_account() -> BankAccount:
    """Basic account holding 100.00."""
    return BankAccount("100", Decimal("100.00"))


@pytest.fixture
def savings_account() -> SavingsAccount:
    """Savings account holding 1000.00 at 5%."""
    return SavingsAccount("200", Decimal("1000.00"), interest_rate=Decimal("5"))


@pytest.fixture
def checking_account() -> CheckingAccount:
    """Empty checking account with a 200.00 credit limit."""
    return CheckingAccount("300", Decimal("0"), credit_limit=Decimal("200"))


@pytest.fixture
def registry(
    basic_account: BankAccount,
    savings_account: SavingsAccount,
    checking_account: CheckingAccount,
) -> AccountRegistry:
    """Registry with one account of each kind."""
    registry = AccountRegistry()
    registry.add(basic_account)
    registry.add(savings_account)
    registry.add(checking_account)
    return registry


@pytest.fixture
def accounts_file(tmp_path: Path) -> Path:
    """Path of a not yet existing accounts file."""
    return tmp_path / "accounts.json"


@pytest.fixture
def store(accounts_file: Path) -> JsonFileStore:
    """JSON store writing to a temporary file."""
    return JsonFileStore(accounts_file)


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo changes setup_logging makes to the root logger."""
    root = logging.getLogger()
    package = logging.getLogger("bank_sim")
    handlers = root.handlers[:]
    levels = (root.level, package.level)
    yield
    root.handlers[:] = handlers
    root.setLevel(levels[0])
    package.setLevel(levels[1])
