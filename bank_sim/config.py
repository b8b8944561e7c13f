"""Configuration management for bank-sim."""

from dataclasses import dataclass, field
from pathlib import Path

from bank_sim.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Accounts file configuration."""

    data_file: Path = field(default_factory=lambda: Path("accounts.json"))
    pretty_json: bool = True


@dataclass
class BankSimConfig:
    """Main configuration for bank-sim."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"
    demo_accounts: int = 0
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}, expected one of {LOG_FORMATS}"
            )
        if self.demo_accounts < 0:
            raise ConfigurationError("Number of demo accounts cannot be negative")

    @classmethod
    def from_env(cls) -> "BankSimConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            data_file=Path(os.getenv("BANK_SIM_DATA_FILE", "accounts.json")),
            pretty_json=os.getenv("BANK_SIM_PRETTY_JSON", "true").lower() == "true",
        )

        return cls(
            storage=storage,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            demo_accounts=_int_from_env("BANK_SIM_DEMO_ACCOUNTS", 0),
            seed=_int_from_env("SEED", None),
        )


def _int_from_env(name: str, default: int | None) -> int | None:
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
