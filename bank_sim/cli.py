"""Command-line entry point for the bank account simulator."""

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from bank_sim.config import LOG_FORMATS, BankSimConfig
from bank_sim.exceptions import ConfigurationError
from bank_sim.generators import AccountGenerator
from bank_sim.logging import setup_logging
from bank_sim.registry import AccountRegistry
from bank_sim.shell import BankShell
from bank_sim.storage import JsonFileStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-sim",
        description="Interactive bank account simulator",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="JSON file accounts are loaded from and saved to (default: accounts.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=LOG_FORMATS,
        default=None,
        help="Log record format (default: standard)",
    )
    parser.add_argument(
        "--demo",
        type=int,
        default=None,
        metavar="N",
        help="Add N generated demo accounts after loading",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for demo accounts",
    )
    return parser


def load_config(args: argparse.Namespace) -> BankSimConfig:
    """Combine environment configuration with command-line overrides."""
    config = BankSimConfig.from_env()
    storage = config.storage
    if args.data_file is not None:
        storage = replace(storage, data_file=args.data_file)

    return replace(
        config,
        storage=storage,
        log_level=args.log_level or config.log_level,
        log_format=args.log_format or config.log_format,
        demo_accounts=config.demo_accounts if args.demo is None else args.demo,
        seed=config.seed if args.seed is None else args.seed,
    )


def add_demo_accounts(registry: AccountRegistry, count: int, seed: int | None = None) -> int:
    """Add ``count`` generated accounts to the registry."""
    generator = AccountGenerator(seed=seed)
    for account in generator.generate_unique(count, existing=registry):
        registry.add(account)
    logger.info("Added %d demo accounts", count)
    return count


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    setup_logging(config.log_level, config.log_format)
    logger.info("Using accounts file %s", config.storage.data_file)

    store = JsonFileStore(config.storage.data_file, pretty=config.storage.pretty_json)
    registry = store.load()
    if store.last_error:
        print(store.last_error)

    shell = BankShell(registry, store)
    if config.demo_accounts:
        add_demo_accounts(registry, config.demo_accounts, config.seed)
        shell.saved = False

    shell.run()


if __name__ == "__main__":
    main()
