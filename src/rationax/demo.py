from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Sequence, TextIO

from rationax.core import flags
from rationax.core.errors import RationalError
from rationax.core.rational import Rational
from rationax.core.text import parse_rational, to_text

logger = logging.getLogger(__name__)

RULE = "=" * 38
THIN_RULE = "-" * 38


def print_header(out: TextIO) -> None:
    print(RULE, file=out)
    print("        MAGICAL FRACTIONS        ", file=out)
    print(RULE, file=out)


def animate_loading(
    out: TextIO,
    delay: float,
    ticks: int = 5,
) -> None:
    print("Calculating... ", end="", file=out, flush=True)
    for _ in range(ticks):
        time.sleep(delay)
        print(".", end="", file=out, flush=True)
    print(" Magic Happens!", file=out)


def compute_results(lhs: Rational, rhs: Rational) -> list[tuple[str, Rational]]:
    return [
        ("Sum", lhs + rhs),
        ("Difference", lhs - rhs),
        ("Product", lhs * rhs),
        ("Quotient", lhs / rhs),
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rationax-demo",
        description="Print the sum, difference, product and quotient of two rationals.",
    )
    parser.add_argument("lhs", nargs="?", default="1/2", help="left operand, e.g. 1/2")
    parser.add_argument("rhs", nargs="?", default="3/4", help="right operand, e.g. 3/4")
    parser.add_argument(
        "--delay",
        type=float,
        default=flags.DEMO_DELAY_SECONDS,
        help="seconds between two dots of the loading animation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(
    argv: Sequence[str] | None = None,
    out: TextIO | None = None,
) -> int:
    out = sys.stdout if out is None else out
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        lhs, rhs = parse_rational(args.lhs), parse_rational(args.rhs)
        results = compute_results(lhs, rhs)
    except RationalError as e:
        logger.debug("demo aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print_header(out)
    print(f"Fraction: {to_text(lhs)}", file=out)
    print(f"Fraction: {to_text(rhs)}", file=out)
    print(THIN_RULE, file=out)

    animate_loading(out, args.delay)

    for name, result in results:
        print(f"{name}: {to_text(result)}", file=out)
    print(RULE, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
