"""Command that prints the difference of two big integers."""

from __future__ import annotations

import argparse

from bintlib.benchmark import NUMBER1, NUMBER2
from bintlib.bigint import BigInt


def _big_int(text: str) -> BigInt:
    try:
        return BigInt(text)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from error


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bintlib",
        description="Print LHS - RHS for two decimal integers of any size.",
    )
    parser.add_argument(
        "lhs",
        nargs="?",
        type=_big_int,
        default=NUMBER1,
        help="minuend (defaults to a built-in 2048-bit number)",
    )
    parser.add_argument(
        "rhs",
        nargs="?",
        type=_big_int,
        default=NUMBER2,
        help="subtrahend (defaults to a built-in 2048-bit number)",
    )
    return parser


def main(argv=None) -> int:
    """Print the difference of the two given numbers."""
    args = _build_parser().parse_args(argv)
    print(args.lhs - args.rhs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())