"""JSON file store for saving and loading the account registry."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from bank_sim.exceptions import BankSimError, PersistenceError
from bank_sim.registry import AccountRegistry
from bank_sim.storage.serialization import accounts_from_document, accounts_to_document

logger = logging.getLogger(__name__)


@dataclass
class StoreResult:
    """Outcome of a save."""

    ok: bool
    message: str
    count: int = 0


class JsonFileStore:
    """Persist accounts to a single JSON file.

    Failures never propagate: ``save`` reports them in its result and
    ``load`` falls back to an empty registry, keeping the reason in
    ``last_error``.
    """

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        path : str | Path
            File the accounts are written to and read from.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty
        self.last_error: str | None = None

    def save(self, registry: AccountRegistry) -> StoreResult:
        """Write every account in the registry to the file."""
        try:
            document = accounts_to_document(registry.list_all())
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(document, f, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as exc:
            self.last_error = f"Failed to save accounts: {exc}"
            logger.error("Saving %s failed: %s", self.path, exc)
            return StoreResult(ok=False, message=self.last_error)

        self.last_error = None
        logger.info("Saved %d accounts to %s", len(registry), self.path)
        return StoreResult(
            ok=True, message=f"Saved {len(registry)} accounts.", count=len(registry)
        )

    def load(self) -> AccountRegistry:
        """Read the registry from the file.

        A missing file yields an empty registry. Any read or decode
        failure is logged, kept in ``last_error`` and also yields an
        empty registry.
        """
        self.last_error = None
        if not self.path.exists():
            logger.info("No accounts file at %s, starting empty", self.path)
            return AccountRegistry()

        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
            registry = AccountRegistry()
            for account in accounts_from_document(document):
                registry.add(account)
        except (json.JSONDecodeError, RecursionError) as exc:
            return self._load_failed(PersistenceError(f"Invalid JSON: {exc}"))
        except (OSError, UnicodeDecodeError, BankSimError) as exc:
            return self._load_failed(exc)

        logger.info("Loaded %d accounts from %s", len(registry), self.path)
        return registry

    def _load_failed(self, exc: Exception) -> AccountRegistry:
        self.last_error = f"Failed to load accounts: {exc}. Starting with an empty list."
        logger.error("Loading %s failed: %s", self.path, exc)
        return AccountRegistry()
