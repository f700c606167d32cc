#!/usr/bin/env python3
"""
Numeral Converter — Entry Point
================================

Converts written Portuguese numerals given on the command line.

Usage:
    python main.py "cento e vinte e dois"               # Long scale (default)
    python main.py --short-scale "dois biliões"         # Short scale
    python main.py --no-short-scale "um bilião"         # Long scale, overriding the env
    python main.py --explain "cento e e dois" "mil"     # Show rejection reasons
    NUMERALS_SHORT_SCALE=true python main.py "um bilião"
"""

from __future__ import annotations

import argparse
import sys

from numeral_converter.config import configure_logging, load_settings
from numeral_converter.converter import NumeralConverter
from numeral_converter.models import ConversionResult


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_result(result: ConversionResult, explain: bool = False) -> None:
    """Print one conversion as `phrase -> value`, coloured by validity."""
    color = _GREEN if result.is_valid else _RED
    print(f"  {result.phrase} {_DIM}->{_RESET} {color}{_BOLD}{result.text}{_RESET}")
    if explain and result.error is not None:
        print(f"    {color}[{result.error.code.value}]{_RESET} {result.error.message}")
        if result.error.position is not None:
            print(f"      {_DIM}token #{result.error.position}: {result.error.token}{_RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert written Portuguese numerals to integers."
    )
    parser.add_argument("phrases", nargs="+", help="numeral phrases to convert")
    parser.add_argument(
        "--short-scale",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="read bilião as 10^9 instead of 10^12 (default: NUMERALS_SHORT_SCALE)",
    )
    parser.add_argument(
        "--explain", action="store_true", help="show why a phrase was rejected"
    )
    return parser


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert every phrase and print the results.

    Returns:
        0 if every phrase converted, 1 if any was rejected.
    """
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings)

    converter = NumeralConverter(short_scale=settings.short_scale)
    results = [converter.run(phrase, args.short_scale) for phrase in args.phrases]

    print()
    for result in results:
        print_result(result, explain=args.explain)
    print()

    return 0 if all(r.is_valid for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
