from __future__ import annotations

import math

from rationax.core.constants import NATIVE_INT_MAX, NATIVE_INT_MIN, PRECISION_FACTOR
from rationax.core.errors import ErrorKind, make_error


def round_half_away(value: float) -> float:
    """Rounds a finite float to the nearest integer, halfway cases away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _scale(value: float) -> float:
    scaled = value * PRECISION_FACTOR
    if math.isnan(scaled):
        raise make_error(ErrorKind.INVALID_INPUT, "cannot convert NaN")
    if math.isinf(scaled):
        raise make_error(ErrorKind.OVERFLOW, f"{value} scaled by {PRECISION_FACTOR} is not finite")
    return scaled


def round_to_precision(value: float) -> float:
    """
    Rounds a float to the resolution of the precision factor, i.e. three decimal digits.

    Args:
        value (float): Value to round

    Raises:
        InvalidInputError: If value is NaN
        RationalOverflowError: If value is infinite or too large to be scaled

    Returns:
        float: ``round(value * PRECISION_FACTOR) / PRECISION_FACTOR``
    """
    return round_half_away(_scale(value)) / PRECISION_FACTOR


def comparison_key(value: float) -> float:
    """
    Rounds a float for comparison. Values that cannot be scaled (NaN, infinities and
    magnitudes close to the float maximum) are compared as they are.
    """
    if not math.isfinite(value * PRECISION_FACTOR):
        return value
    return round_to_precision(value)


def scale_to_int(value: float) -> int:
    """
    Scales a float by the precision factor and rounds it to an integer numerator
    over PRECISION_FACTOR. This is lossy: everything beyond the third decimal digit is dropped.

    Args:
        value (float): Finite or non-finite real value

    Raises:
        InvalidInputError: If value is NaN
        RationalOverflowError: If value is infinite or the scaled value leaves the native range

    Returns:
        int: The scaled and rounded numerator
    """
    scaled = round_half_away(_scale(value))
    if not NATIVE_INT_MIN <= scaled <= NATIVE_INT_MAX:
        raise make_error(ErrorKind.OVERFLOW, f"{value} scaled by {PRECISION_FACTOR} leaves the native range")
    return int(scaled)
