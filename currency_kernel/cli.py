"""
Display an amount in a currency from the command line.

Usage:
    currency-display 1234.1 USD                      # $ 1,234.10
    currency-display 1234567 BDT --standard-decimals  # Tk 12,34,567.00
    currency-display 1123 BDT --standard-symbol --separator ""
    currency-display --check --data-dir ./tables     # validate reference tables
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from functools import partial
from pathlib import Path

import yaml

from currency_data import get_currency_data, get_reference_tables
from currency_kernel.domain.options import DisplayOptions
from currency_kernel.exceptions import ReferenceDataError
from currency_kernel.logging_config import configure_logging
from currency_kernel.services.display_service import display_amount_on_currency_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="currency-display",
        description="Round, group and display an amount in a currency.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("amount", nargs="?", type=float, help="Amount to display")
    parser.add_argument("currency", nargs="?", help="ISO 4217 currency code")
    parser.add_argument("--nearest", action="store_true", help="Round half-up instead of ceiling")
    parser.add_argument(
        "--standard-decimals", action="store_true", help="Use standard instead of compact decimals"
    )
    parser.add_argument("--skip-rounding", action="store_true", help="Do not round the amount")
    parser.add_argument(
        "--skip-fixed-decimals", action="store_true", help="Do not pad or truncate decimals"
    )
    parser.add_argument("--skip-formatting", action="store_true", help="Do not group digits")
    parser.add_argument("--native-symbol", action="store_true", help="Use the native symbol")
    parser.add_argument(
        "--standard-symbol", action="store_true", help="Use the standard symbol (wins over --native-symbol)"
    )
    parser.add_argument(
        "--separator", default=None, help="Text between symbol and amount (default: one space)"
    )
    parser.add_argument(
        "--data-dir", type=Path, default=None, help="Directory with currencies.yaml and countries.yaml"
    )
    parser.add_argument("--check", action="store_true", help="Validate the reference tables and exit")
    parser.add_argument("--verbose", action="store_true", help="Emit JSON log lines to stderr")
    return parser


def options_from_args(args: argparse.Namespace) -> DisplayOptions:
    return DisplayOptions(
        use_nearest_rounding=args.nearest,
        use_standard_decimals=args.standard_decimals,
        skip_rounding=args.skip_rounding,
        skip_fixed_decimals=args.skip_fixed_decimals,
        skip_formatting=args.skip_formatting,
        use_native_symbol=args.native_symbol,
        use_standard_symbol=args.standard_symbol,
        separator=args.separator,
    )


def _check(data_dir: Path | None) -> int:
    try:
        tables = get_reference_tables(data_dir)
    except ReferenceDataError as exc:
        print(f"  ERROR [{exc.code}]: {exc}", file=sys.stderr)
        return 1
    except (FileNotFoundError, yaml.YAMLError) as exc:
        print(f"  ERROR [{type(exc).__name__}]: {exc}", file=sys.stderr)
        return 1
    print(f"currencies: {tables.currency_count}")
    print(f"countries:  {tables.country_count}")
    print(f"checksum:   {tables.checksum}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.check:
        return _check(args.data_dir)

    if args.amount is None or args.currency is None:
        parser.error("amount and currency are required unless --check is given")

    lookup = partial(get_currency_data, data_dir=args.data_dir)
    text = asyncio.run(
        display_amount_on_currency_code(
            args.amount, args.currency, options_from_args(args), lookup=lookup
        )
    )
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
