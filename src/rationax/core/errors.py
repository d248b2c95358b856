from __future__ import annotations

import logging
from enum import Enum

from frozendict import frozendict

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    DIVIDE_BY_ZERO = "divide_by_zero"
    INVALID_INPUT = "invalid_input"
    OVERFLOW = "overflow"


ERROR_MESSAGES: frozendict[ErrorKind, str] = frozendict(
    {
        ErrorKind.DIVIDE_BY_ZERO: "Can't divide by zero",
        ErrorKind.INVALID_INPUT: "Invalid input",
        ErrorKind.OVERFLOW: "Overflow",
    }
)


class RationalError(Exception):
    """Base class of every failure raised by a Rational operation."""

    kind: ErrorKind

    def __init__(self, detail: str | None = None):
        message = ERROR_MESSAGES[self.kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class DivideByZeroError(RationalError, ZeroDivisionError):
    kind = ErrorKind.DIVIDE_BY_ZERO


class InvalidInputError(RationalError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class RationalOverflowError(RationalError, OverflowError):
    kind = ErrorKind.OVERFLOW


_ERROR_TYPES: frozendict[ErrorKind, type[RationalError]] = frozendict(
    {
        ErrorKind.DIVIDE_BY_ZERO: DivideByZeroError,
        ErrorKind.INVALID_INPUT: InvalidInputError,
        ErrorKind.OVERFLOW: RationalOverflowError,
    }
)


def make_error(
    kind: ErrorKind,
    detail: str | None = None,
) -> RationalError:
    """
    Builds the exception matching an error kind. The caller raises it, so the
    traceback points at the failure site.

    Args:
        kind (ErrorKind): Kind of failure
        detail (str | None, optional): Extra context appended to the default message. Defaults to None.

    Returns:
        RationalError: Exception instance of the subclass registered for ``kind``
    """
    error = _ERROR_TYPES[kind](detail)
    logger.debug("%s: %s", kind.name, error)
    return error
