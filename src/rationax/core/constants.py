import numpy as np

"""Scale used to round floating values to three decimal digits before they are turned into a Rational"""

PRECISION_FACTOR: int = 1000

"""
Integer widths of the Rational representation.
NATIVE_INT_DTYPE bounds the stored numerator and denominator. Every arithmetic
result is first computed in WIDE_INT_DTYPE, which must be strictly wider, and only
then narrowed back.

| Name               | dtype    | Range                      |
| ------------------ | -------- | -------------------------- |
| `NATIVE_INT_DTYPE` | `int32`  | -2**31 .. 2**31 - 1        |
| `WIDE_INT_DTYPE`   | `int64`  | -2**63 .. 2**63 - 1        |
"""
NATIVE_INT_DTYPE = np.int32
WIDE_INT_DTYPE = np.int64

NATIVE_INT_MIN: int = int(np.iinfo(NATIVE_INT_DTYPE).min)
NATIVE_INT_MAX: int = int(np.iinfo(NATIVE_INT_DTYPE).max)
