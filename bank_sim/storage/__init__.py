"""Account persistence."""

from bank_sim.storage.json_file import JsonFileStore, StoreResult

__all__ = ["JsonFileStore", "StoreResult"]
