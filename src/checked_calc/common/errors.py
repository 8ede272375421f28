"""
Exceptions raised while turning command-line input into a request.

Hierarchy
---------
CalcError
├── UsageError
│   ├── MalformedArgumentError
│   ├── UnknownOperationError
│   ├── MissingArgumentError
│   └── UnexpectedArgumentError
└── MathError
    └── DomainError

HelpRequested is a separate signal, not a failure.
"""
from typing import Optional

from checked_calc.common.models import ErrorKind


class CalcError(Exception):
    """
    Base class for every classified failure.

    :param str message: Human readable description
    :param Optional[str] context: Operation name the failure relates to, if one was resolved
    """

    kind: ErrorKind

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.context: Optional[str] = context


class UsageError(CalcError):
    """Caller mistake found before any arithmetic runs."""


class MalformedArgumentError(UsageError):
    kind = ErrorKind.MALFORMED_ARGUMENT


class UnknownOperationError(UsageError):
    kind = ErrorKind.UNKNOWN_OPERATION


class MissingArgumentError(UsageError):
    kind = ErrorKind.MISSING_ARGUMENT


class UnexpectedArgumentError(UsageError):
    kind = ErrorKind.UNEXPECTED_ARGUMENT


class MathError(CalcError):
    """Structurally valid input the arithmetic cannot accept."""


class DomainError(MathError):
    kind = ErrorKind.DOMAIN_INVALID


class HelpRequested(Exception):
    """Raised as soon as -h/--help is tokenized."""
