from rationax.core.errors import (
    DivideByZeroError,
    ErrorKind,
    InvalidInputError,
    RationalError,
    RationalOverflowError,
)
from rationax.core.rational import Rational
from rationax.core.text import parse_rational, scan_rational, to_text


__all__ = [
    "Rational",
    "ErrorKind",
    "RationalError",
    "DivideByZeroError",
    "InvalidInputError",
    "RationalOverflowError",
    "parse_rational",
    "scan_rational",
    "to_text",
]
