#!/usr/bin/env python3
"""Generate a demo accounts file.

Writes a JSON accounts file that ``bank-sim --data-file`` can load,
useful for manual testing of the shell.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_sim.generators import AccountGenerator
from bank_sim.logging import setup_logging
from bank_sim.registry import AccountRegistry
from bank_sim.storage import JsonFileStore


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a demo accounts file")
    parser.add_argument(
        "--accounts",
        type=int,
        default=20,
        help="Number of accounts to generate (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=project_root / "local" / "accounts.json",
        help="Output file (default: local/accounts.json)",
    )
    args = parser.parse_args()

    setup_logging("INFO")

    registry = AccountRegistry()
    for account in AccountGenerator(seed=args.seed).generate_unique(args.accounts):
        registry.add(account)

    result = JsonFileStore(args.output).save(registry)
    print(result.message)
    for kind, count in registry.summary().items():
        print(f"  {kind}: {count}")
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
