from __future__ import annotations

import math
from typing import Any

import numpy as np

from rationax.core.constants import NATIVE_INT_MAX, NATIVE_INT_MIN, WIDE_INT_DTYPE
from rationax.core.errors import ErrorKind, make_error


def is_integer_like(value: Any) -> bool:
    # bool is an int subclass but never a valid operand
    return isinstance(value, int | np.integer) and not isinstance(value, bool | np.bool_)


def fits_native(value: Any) -> bool:
    return NATIVE_INT_MIN <= int(value) <= NATIVE_INT_MAX


def _out_of_range(value: Any) -> str:
    # bit length only, huge ints exceed the str() digit limit
    return f"{int(value).bit_length()}-bit value does not fit into the native integer width"


def widen(value: Any) -> np.int64:
    """
    Converts a bounded integer into the widened intermediate type.

    Args:
        value (Any): Python or numpy integer inside the native range

    Returns:
        np.int64: The same value in the wide dtype
    """
    if not fits_native(value):
        raise make_error(ErrorKind.OVERFLOW, _out_of_range(value))
    return WIDE_INT_DTYPE(value)


def narrow(value: Any) -> int:
    """
    Narrows a widened intermediate back to the native range.

    Args:
        value (Any): Integer computed in the wide dtype

    Raises:
        RationalOverflowError: If the value lies outside the native range

    Returns:
        int: Python int inside the native range
    """
    if not fits_native(value):
        raise make_error(ErrorKind.OVERFLOW, _out_of_range(value))
    return int(value)


def reduce_terms(
    numerator: Any,
    denominator: Any,
) -> tuple[int, int]:
    """
    Reduces a ratio to lowest terms with the sign folded into the numerator.
    Inputs are Python or numpy integers, the outputs are narrowed.

    Args:
        numerator (Any): Numerator
        denominator (Any): Non-zero denominator

    Raises:
        DivideByZeroError: If the denominator is zero
        RationalOverflowError: If the reduced terms do not fit the native width

    Returns:
        tuple[int, int]: Canonical numerator and strictly positive denominator
    """
    num, denom = int(numerator), int(denominator)
    if denom == 0:
        raise make_error(ErrorKind.DIVIDE_BY_ZERO, f"denominator of {num}/0")
    if num == 0:
        return 0, 1

    common_divisor = math.gcd(abs(num), abs(denom))
    num //= common_divisor
    denom //= common_divisor

    if denom < 0:
        num = -num
        denom = -denom

    return narrow(num), narrow(denom)
