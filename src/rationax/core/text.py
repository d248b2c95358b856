from __future__ import annotations

import logging
import re

from rationax.core.constants import NATIVE_INT_MAX
from rationax.core.errors import ErrorKind, make_error
from rationax.core.integers import fits_native
from rationax.core.rational import Rational

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s*")
_INTEGER = re.compile(r"[+-]?\d+")
_MAX_DIGITS = len(str(NATIVE_INT_MAX))


def to_text(value: Rational) -> str:
    """
    Serializes a Rational as ``"<numerator>/<denominator>"``. A negative denominator
    is shown positive by negating both terms.

    Args:
        value (Rational): Value to serialize

    Returns:
        str: Text form of the value
    """
    num, denom = value.numerator, value.denominator
    if denom == 0:
        raise make_error(ErrorKind.DIVIDE_BY_ZERO, "denominator is zero")
    if denom < 0:
        num, denom = -num, -denom
    return f"{num}/{denom}"


def _scan_integer(text: str, pos: int) -> tuple[int, int]:
    pos = _WHITESPACE.match(text, pos).end()
    match = _INTEGER.match(text, pos)
    if match is None:
        raise make_error(ErrorKind.INVALID_INPUT, f"expected an integer at position {pos} of {text!r}")
    literal = match.group()
    sign = "-" if literal.startswith("-") else ""
    digits = literal.lstrip("+-").lstrip("0") or "0"
    # length checked before int() so huge literals never hit the int/str digit limit
    if len(digits) > _MAX_DIGITS or not fits_native(int(sign + digits)):
        raise make_error(ErrorKind.INVALID_INPUT, f"{literal[:20]!r}... does not fit into the native integer width")
    value = int(sign + digits)
    return value, match.end()


def scan_rational(
    text: str,
    pos: int = 0,
) -> tuple[Rational, int]:
    """
    Reads one Rational from ``text`` starting at ``pos`` and reports where reading stopped.
    Leading whitespace is skipped. The numerator is followed either directly by ``/``
    and the denominator, or by whitespace and the denominator: ``"3/4"``, ``"3/ 4"``
    and ``"3 4"`` all read as 3/4.

    Args:
        text (str): Input text
        pos (int, optional): Offset to start reading at. Defaults to 0.

    Raises:
        InvalidInputError: If an integer is missing, out of range, or the denominator is zero

    Returns:
        tuple[Rational, int]: The parsed value and the offset just past it
    """
    numerator, pos = _scan_integer(text, pos)
    if text.startswith("/", pos):
        pos += 1
    denominator, pos = _scan_integer(text, pos)
    if denominator == 0:
        raise make_error(ErrorKind.INVALID_INPUT, f"zero denominator in {text!r}")
    logger.debug("scanned %d/%d from %r", numerator, denominator, text)
    return Rational(numerator, denominator), pos


def parse_rational(text: str) -> Rational:
    """Parses a whole string holding exactly one Rational, surrounding whitespace allowed."""
    value, pos = scan_rational(text)
    if text[pos:].strip():
        raise make_error(ErrorKind.INVALID_INPUT, f"unexpected trailing text {text[pos:]!r}")
    return value
