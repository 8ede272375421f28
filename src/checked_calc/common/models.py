"""Pydantic models for arithmetic operation requests and results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
UINT64_MAX: int = 2**64 - 1


class Operation(str, Enum):
    """Closed set of operations understood by the calculator."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    FACT = "fact"

    @property
    def display_name(self) -> str:
        """Name as typed on the command line."""
        return self.value

    @property
    def needs_b(self) -> bool:
        """Whether the operation takes a second operand."""
        return self is not Operation.FACT

    @property
    def usage(self) -> str:
        """One-line description shown in the help text."""
        return _USAGE[self]

    @classmethod
    def lookup(cls, name: str) -> Optional["Operation"]:
        """
        Resolve an operation name, case-sensitive exact match.

        :param str name: Name given on the command line

        :return: Matching operation, or None when the name is unknown
        :rtype: Optional[Operation]
        """
        for op in cls:
            if op.value == name:
                return op
        return None


_USAGE: dict[Operation, str] = {
    Operation.ADD: "a + b",
    Operation.SUB: "a - b",
    Operation.MUL: "a * b",
    Operation.DIV: "a / b   (checks division by 0)",
    Operation.POW: "a ^ b   (b must be >= 0)",
    Operation.FACT: "a!      (a must be >= 0)",
}


class ErrorKind(str, Enum):
    """Every way an invocation can fail."""

    DIVIDE_BY_ZERO = "divide-by-zero"
    OVERFLOW = "overflow"
    DOMAIN_INVALID = "domain-invalid"
    UNKNOWN_OPERATION = "unknown-operation"
    MALFORMED_ARGUMENT = "malformed-argument"
    MISSING_ARGUMENT = "missing-argument"
    UNEXPECTED_ARGUMENT = "unexpected-argument"

    @property
    def is_usage(self) -> bool:
        """True for caller mistakes detected before any arithmetic runs."""
        return self in (
            ErrorKind.UNKNOWN_OPERATION,
            ErrorKind.MALFORMED_ARGUMENT,
            ErrorKind.MISSING_ARGUMENT,
            ErrorKind.UNEXPECTED_ARGUMENT,
        )


class ValueKind(str, Enum):
    """Representation carried by a successful result."""

    SIGNED = "signed"
    UNSIGNED = "unsigned"


class OperationRequest(BaseModel):
    """A validated operation with its operands, ready for the engine."""

    model_config = ConfigDict(frozen=True)

    op: Operation = Field(..., description="Operation to perform")
    a: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="First operand")
    b: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX, description="Second operand")


class OperationResult(BaseModel):
    """
    Outcome of a computation: either a value with its representation, or an error kind.

    Exactly one of ``value`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[int] = Field(default=None, description="Computed value on success")
    kind: Optional[ValueKind] = Field(default=None, description="Representation of the value")
    error: Optional[ErrorKind] = Field(default=None, description="Failure reason")

    @model_validator(mode="after")
    def check_exclusive(self) -> "OperationResult":
        """Ensure the result is either a success or a failure, never both."""
        if self.error is None:
            if self.value is None or self.kind is None:
                raise ValueError("Successful result needs both a value and a kind")
            lower, upper = (INT64_MIN, INT64_MAX) if self.kind is ValueKind.SIGNED else (0, UINT64_MAX)
            if not lower <= self.value <= upper:
                raise ValueError(f"Value {self.value} does not fit a {self.kind.value} 64-bit integer")
        elif self.value is not None or self.kind is not None:
            raise ValueError("Failed result cannot carry a value")
        return self

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok_signed(cls, value: int) -> "OperationResult":
        return cls(value=value, kind=ValueKind.SIGNED)

    @classmethod
    def ok_unsigned(cls, value: int) -> "OperationResult":
        return cls(value=value, kind=ValueKind.UNSIGNED)

    @classmethod
    def failure(cls, error: ErrorKind) -> "OperationResult":
        return cls(error=error)
