from __future__ import annotations

import operator
from typing import Any, Callable, Union

import numpy as np

from rationax.core.constants import NATIVE_INT_MAX, PRECISION_FACTOR
from rationax.core.errors import ErrorKind, make_error
from rationax.core.integers import is_integer_like, narrow, reduce_terms, widen
from rationax.core.precision import comparison_key, round_to_precision, scale_to_int

RationalLike = Union["Rational", int, np.integer]
ScalarLike = Union[float, np.floating]


def _is_float_like(value: Any) -> bool:
    return isinstance(value, float | np.floating)


class Rational:
    """
    Ratio of two bounded integers, always stored in canonical form: numerator and
    denominator share no common divisor and the denominator is strictly positive,
    so the sign lives on the numerator.

    Arithmetic between Rationals (and Python ints) is exact up to the bounded
    integer width and raises ``RationalOverflowError`` instead of wrapping.
    Arithmetic with floats, equality and ordering all work on values rounded to
    three decimal digits (see ``PRECISION_FACTOR``).
    """

    __slots__ = ("_numerator", "_denominator")

    # mutable through compound assignment and increments
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        numerator: Rational | int | float = 0,
        denominator: int = 1,
    ):
        if isinstance(numerator, Rational):
            if denominator != 1:
                raise TypeError("Cannot combine a Rational with an explicit denominator")
            numerator, denominator = numerator._numerator, numerator._denominator
        elif _is_float_like(numerator):
            if denominator != 1:
                raise TypeError("Cannot combine a float with an explicit denominator")
            numerator, denominator = scale_to_int(float(numerator)), PRECISION_FACTOR
        elif not is_integer_like(numerator) or not is_integer_like(denominator):
            raise TypeError(
                f"Rational expects integers, got {type(numerator).__name__} and {type(denominator).__name__}"
            )
        self._numerator, self._denominator = reduce_terms(widen(numerator), widen(denominator))

    @classmethod
    def from_float(cls, value: float) -> Rational:
        """
        Approximates a real value by rounding it to three decimal digits and reducing
        ``round(value * 1000) / 1000``. The conversion is lossy on purpose: 1/3 turns
        into 333/1000, not back into 1/3.

        Args:
            value (float): Value to convert

        Returns:
            Rational: Canonical approximation of ``value``
        """
        return cls(float(value))

    @classmethod
    def parse(cls, text: str) -> Rational:
        from rationax.core.text import parse_rational

        return parse_rational(text)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def _assign(self, other: Rational) -> Rational:
        self._numerator, self._denominator = other._numerator, other._denominator
        return self

    def copy(self) -> Rational:
        return Rational(self)

    def __copy__(self) -> Rational:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Rational:
        return self.copy()

    # Conversion
    def to_float(self) -> float:
        if self._denominator == 0:
            raise make_error(ErrorKind.DIVIDE_BY_ZERO, "denominator is zero")
        return self._numerator / self._denominator

    def to_double(self) -> float:
        return self.to_float()

    def to_int(self) -> int:
        """Integer quotient, truncated towards zero."""
        if self._denominator == 0:
            raise make_error(ErrorKind.DIVIDE_BY_ZERO, "denominator is zero")
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    # Exact arithmetic
    @staticmethod
    def _coerce(other: Any) -> Rational | None:
        if isinstance(other, Rational):
            return other
        if is_integer_like(other):
            return Rational(other, 1)
        return None

    @staticmethod
    def _from_wide(numerator: Any, denominator: Any) -> Rational:
        # intermediate terms must fit the native width before they are reduced
        result = Rational.__new__(Rational)
        result._numerator, result._denominator = reduce_terms(narrow(numerator), narrow(denominator))
        return result

    def _add(self, other: Rational) -> Rational:
        a, b = widen(self._numerator), widen(self._denominator)
        c, d = widen(other._numerator), widen(other._denominator)
        return self._from_wide(a * d + c * b, b * d)

    def _sub(self, other: Rational) -> Rational:
        a, b = widen(self._numerator), widen(self._denominator)
        c, d = widen(other._numerator), widen(other._denominator)
        return self._from_wide(a * d - c * b, b * d)

    def _mul(self, other: Rational) -> Rational:
        a, b = widen(self._numerator), widen(self._denominator)
        c, d = widen(other._numerator), widen(other._denominator)
        return self._from_wide(a * c, b * d)

    def _div(self, other: Rational) -> Rational:
        if other._numerator == 0:
            raise make_error(ErrorKind.DIVIDE_BY_ZERO, f"{self} / {other}")
        a, b = widen(self._numerator), widen(self._denominator)
        c, d = widen(other._numerator), widen(other._denominator)
        return self._from_wide(a * d, b * c)

    # Rounded float arithmetic
    def _scalar_op(
        self,
        scalar: ScalarLike,
        op: Callable[[float, float], float],
        reflected: bool = False,
    ) -> Rational:
        """
        Combines this value with a float at three decimal digits: both operands are
        rounded, combined, and the result is rounded again before being turned back
        into a Rational by ``from_float``.

        Args:
            scalar (ScalarLike): Float operand
            op (Callable[[float, float], float]): Binary float operation
            reflected (bool, optional): If True, the scalar is the left operand. Defaults to False.

        Returns:
            Rational: The rounded result
        """
        lhs = round_to_precision(self.to_float())
        rhs = round_to_precision(float(scalar))
        if reflected:
            lhs, rhs = rhs, lhs
        if op is operator.truediv and rhs == 0:
            raise make_error(ErrorKind.DIVIDE_BY_ZERO, f"{lhs} / {rhs}")
        return Rational.from_float(round_to_precision(op(lhs, rhs)))

    def _binary(
        self,
        other: Any,
        exact: Callable[[Rational, Rational], Rational],
        op: Callable[[float, float], float],
        reflected: bool = False,
    ) -> Rational:
        if _is_float_like(other):
            return self._scalar_op(other, op, reflected=reflected)
        other_rational = self._coerce(other)
        if other_rational is None:
            return NotImplemented
        if reflected:
            return exact(other_rational, self)
        return exact(self, other_rational)

    def __add__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._add, operator.add)

    def __radd__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._add, operator.add, reflected=True)

    def __sub__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._sub, operator.sub)

    def __rsub__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._sub, operator.sub, reflected=True)

    def __mul__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._mul, operator.mul)

    def __rmul__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._mul, operator.mul, reflected=True)

    def __truediv__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._div, operator.truediv)

    def __rtruediv__(self, other: RationalLike | ScalarLike) -> Rational:
        return self._binary(other, Rational._div, operator.truediv, reflected=True)

    # Compound assignment mutates in place
    def __iadd__(self, other: RationalLike | ScalarLike) -> Rational:
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __isub__(self, other: RationalLike | ScalarLike) -> Rational:
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __imul__(self, other: RationalLike | ScalarLike) -> Rational:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __itruediv__(self, other: RationalLike | ScalarLike) -> Rational:
        result = self.__truediv__(other)
        if result is NotImplemented:
            return NotImplemented
        return self._assign(result)

    def __neg__(self) -> Rational:
        return self._from_wide(-widen(self._numerator), widen(self._denominator))

    def __pos__(self) -> Rational:
        return self.copy()

    def __abs__(self) -> Rational:
        return -self if self._numerator < 0 else self.copy()

    # Integer power
    def __pow__(self, exponent: int) -> Rational:
        if not is_integer_like(exponent):
            return NotImplemented
        exponent = int(exponent)

        if self._numerator == 0 and exponent <= 0:
            raise make_error(ErrorKind.DIVIDE_BY_ZERO, f"{self} to a non-positive power")
        # any term of magnitude >= 2 leaves the native range beyond this exponent
        if abs(exponent) > NATIVE_INT_MAX.bit_length() and (abs(self._numerator) > 1 or self._denominator > 1):
            raise make_error(ErrorKind.OVERFLOW, f"{self} to a power beyond {NATIVE_INT_MAX.bit_length()}")
        if exponent >= 0:
            new_num, new_denom = self._numerator**exponent, self._denominator**exponent
        else:
            # flip the fraction and use the positive exponent
            new_num, new_denom = self._denominator ** (-exponent), self._numerator ** (-exponent)
        return self._from_wide(new_num, new_denom)

    # Increment and decrement by exactly one
    def increment(self) -> Rational:
        """Prefix increment: adds one in place and returns the receiver."""
        step = self._from_wide(widen(self._numerator) + widen(self._denominator), widen(self._denominator))
        return self._assign(step)

    def decrement(self) -> Rational:
        """Prefix decrement: subtracts one in place and returns the receiver."""
        step = self._from_wide(widen(self._numerator) - widen(self._denominator), widen(self._denominator))
        return self._assign(step)

    def post_increment(self) -> Rational:
        """Postfix increment: returns a copy of the value before adding one in place."""
        snapshot = self.copy()
        self.increment()
        return snapshot

    def post_decrement(self) -> Rational:
        """Postfix decrement: returns a copy of the value before subtracting one in place."""
        snapshot = self.copy()
        self.decrement()
        return snapshot

    # Comparison operators work on values rounded to the precision factor
    def _rounded(self) -> float:
        return round_to_precision(self.to_float())

    @staticmethod
    def _rounded_other(other: Any) -> float | None:
        if _is_float_like(other):
            return comparison_key(float(other))
        other_rational = Rational._coerce(other)
        if other_rational is None:
            return None
        return other_rational._rounded()

    def __eq__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() == rhs

    def __ne__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() != rhs

    def __lt__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() < rhs

    def __le__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() <= rhs

    def __gt__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() > rhs

    def __ge__(self, other: Any) -> bool:
        rhs = self._rounded_other(other)
        if rhs is None:
            return NotImplemented
        return self._rounded() >= rhs
