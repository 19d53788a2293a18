#!/usr/bin/env python3
"""Write a file of synthetic accounts for manual testing.

Example::

    python scripts/seed_demo_accounts.py --count 20 --seed 42
    console-bank   # then log in with one of the printed numbers
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from console_bank.config import DEFAULT_DATA_FILE
from console_bank.generators import DemoAccountGenerator
from console_bank.logging import get_logger, setup_logging
from console_bank.persistence import JsonAccountStore

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed an account file with demo accounts")
    parser.add_argument("--count", type=int, default=10, help="Accounts to create (default: 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=DEFAULT_DATA_FILE,
        help=f"Account file to extend (default: {DEFAULT_DATA_FILE})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level="INFO")

    store = JsonAccountStore(args.data_file)
    registry = store.load()
    if store.last_error:
        logger.error("Refusing to overwrite unreadable file %s", args.data_file)
        return 1

    accounts = DemoAccountGenerator(seed=args.seed).populate(registry, args.count)
    if not store.save(registry):
        return 1

    for account in accounts:
        print(f"{account.account_number}  {account.kind.value:<8} {account.balance:>10}  {account.holder_name}")
    print(f"{len(registry)} accounts in {args.data_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
