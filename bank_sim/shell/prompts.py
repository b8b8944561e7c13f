"""Parsing of operator input."""

from decimal import Decimal

from bank_sim.exceptions import InvalidArgumentError
from bank_sim.models import to_decimal


def parse_amount(raw: str) -> Decimal | None:
    """Parse a decimal amount, accepting a comma as decimal separator.

    Returns None when the input is not a number or is out of range.
    """
    text = raw.strip().replace(" ", "").replace(",", ".")
    if not text:
        return None
    try:
        return to_decimal(text)
    except InvalidArgumentError:
        return None


def parse_choice(raw: str, choices: dict[str, str]) -> str | None:
    """Return the option key chosen by the operator, or None."""
    key = raw.strip()
    return key if key in choices else None


def is_confirmation_declined(raw: str) -> bool:
    """True when the operator answered ``n`` to a yes/no question."""
    return raw.strip().lower() in ("n", "no")
