"""Conversion between accounts and JSON-ready records."""

from dataclasses import fields
from datetime import datetime
from decimal import Decimal
from typing import Any

from bank_sim.exceptions import InvalidArgumentError, PersistenceError
from bank_sim.models import ACCOUNT_CLASSES, AccountKind, BankAccount

FORMAT_VERSION = 1

_BASE_FIELDS = ("account_number", "balance", "cash_on_hand")


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output.

    Decimals become strings so amounts survive a round trip exactly.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, datetime):
        return value.isoformat()
    return value


def account_to_record(account: BankAccount) -> dict[str, Any]:
    """Convert an account to a record tagged with its kind."""
    record: dict[str, Any] = {"kind": account.kind.value}
    for f in fields(account):
        record[f.name] = serialize_value(getattr(account, f.name))
    return record


def account_from_record(record: Any) -> BankAccount:
    """Rebuild an account from a record produced by :func:`account_to_record`.

    Raises
    ------
    PersistenceError
        If the record is malformed, has an unknown kind or invalid values.
    """
    if not isinstance(record, dict):
        raise PersistenceError(f"Account record must be an object, got {type(record).__name__}")

    try:
        kind = AccountKind(record["kind"])
    except KeyError as exc:
        raise PersistenceError("Account record has no kind") from exc
    except ValueError as exc:
        raise PersistenceError(f"Unknown account kind {record['kind']!r}") from exc

    cls = ACCOUNT_CLASSES[kind]
    extra = [f.name for f in fields(cls) if f.name not in _BASE_FIELDS]

    try:
        return cls.restore(
            record["account_number"],
            record["balance"],
            record["cash_on_hand"],
            **{name: record[name] for name in extra},
        )
    except KeyError as exc:
        raise PersistenceError(f"Account record is missing field {exc.args[0]!r}") from exc
    except InvalidArgumentError as exc:
        raise PersistenceError(f"Invalid account record: {exc}") from exc


def accounts_to_document(accounts: Any, saved_at: datetime | None = None) -> dict[str, Any]:
    """Build the top-level document written to the accounts file."""
    return {
        "format_version": FORMAT_VERSION,
        "saved_at": serialize_value(saved_at or datetime.now()),
        "accounts": [account_to_record(account) for account in accounts],
    }


def accounts_from_document(document: Any) -> list[BankAccount]:
    """Decode the accounts held in a document read from the accounts file."""
    if isinstance(document, list):
        records = document
    elif isinstance(document, dict):
        version = document.get("format_version", FORMAT_VERSION)
        if version != FORMAT_VERSION:
            raise PersistenceError(f"Unsupported file format version {version!r}")
        records = document.get("accounts")
        if not isinstance(records, list):
            raise PersistenceError("Accounts file has no account list")
    else:
        raise PersistenceError("Accounts file must contain an object or a list")

    return [account_from_record(record) for record in records]
