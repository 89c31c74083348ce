"""Command line: read a CSV of expenses and print the settlement."""
import argparse
import logging
import os
import sys
from typing import Optional

from splitledger.services.csv_source import load_ledger
from splitledger.services.report import format_balances, format_transactions
from splitledger.services.transfers import InvalidRowError

logger = logging.getLogger("splitledger")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="splitledger", description="Settle shared expenses from a CSV file.")
    p.add_argument("csv", nargs="?", default=None,
                   help="rows of payer,amount,beneficiary,... (default: $LEDGER_INPUT_FILE or ./transactions.csv)")
    p.add_argument("--balances", action="store_true", help="also print net balances before settlement")
    p.add_argument("--log-level", type=str.upper, default=os.getenv("LOG_LEVEL", "INFO"),
                   choices=LOG_LEVELS, help="logging level (default: $LOG_LEVEL or INFO)")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        ledger = load_ledger(args.csv, settle=False)
    except InvalidRowError as e:
        logger.error(f"Invalid row {e.fields}: {e}")
        return 1
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1
    except UnicodeDecodeError as e:
        logger.error(f"Input is not valid UTF-8: {e}")
        return 1

    if args.balances:
        print(format_balances(ledger.balances))
    ledger.settle()
    print()
    print(format_transactions(ledger.transactions))
    return 0


if __name__ == "__main__":
    sys.exit(main())
