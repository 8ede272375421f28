"""Test the Operation, ErrorKind, OperationRequest and OperationResult models."""
from pydantic import ValidationError
import pytest

from checked_calc.common.models import (
    INT64_MAX,
    INT64_MIN,
    ErrorKind,
    Operation,
    OperationRequest,
    OperationResult,
    ValueKind,
)


@pytest.mark.parametrize("name", ["add", "sub", "mul", "div", "pow", "fact"])
def test_operation_lookup_exact_name(name: str) -> None:
    """Every operation name resolves to its variant."""
    op = Operation.lookup(name)
    assert op is not None
    assert op.display_name == name


@pytest.mark.parametrize("name", ["ADD", "Add", "xor", "", " add", "fac"])
def test_operation_lookup_unknown(name: str) -> None:
    """Lookup is case-sensitive and exact."""
    assert Operation.lookup(name) is None


def test_operation_arity() -> None:
    """Only fact takes a single operand."""
    assert [op for op in Operation if not op.needs_b] == [Operation.FACT]


def test_error_kind_tiers() -> None:
    """Usage errors and math errors are disjoint."""
    math_kinds = {kind for kind in ErrorKind if not kind.is_usage}
    assert math_kinds == {ErrorKind.DIVIDE_BY_ZERO, ErrorKind.OVERFLOW, ErrorKind.DOMAIN_INVALID}


def test_operation_request_valid() -> None:
    """A valid request keeps its operands."""
    req = OperationRequest(op=Operation.ADD, a=2, b=3)
    assert req.op is Operation.ADD
    assert (req.a, req.b) == (2, 3)


def test_operation_request_is_frozen() -> None:
    """A request cannot be mutated after validation."""
    req = OperationRequest(op=Operation.FACT, a=5)
    with pytest.raises(ValidationError):
        req.a = 6


@pytest.mark.parametrize("a", [INT64_MAX + 1, INT64_MIN - 1])
def test_operation_request_rejects_out_of_range(a: int) -> None:
    """Operands are limited to the signed 64-bit range."""
    with pytest.raises(ValidationError):
        OperationRequest(op=Operation.ADD, a=a, b=0)


def test_operation_result_success() -> None:
    """A success carries a value and its representation."""
    res = OperationResult.ok_unsigned(120)
    assert res.is_ok
    assert res.value == 120
    assert res.kind is ValueKind.UNSIGNED
    assert res.error is None


def test_operation_result_failure() -> None:
    """A failure carries only the error kind."""
    res = OperationResult.failure(ErrorKind.OVERFLOW)
    assert not res.is_ok
    assert res.value is None
    assert res.kind is None


@pytest.mark.parametrize(
    "fields",
    [
        {"value": 1, "kind": ValueKind.SIGNED, "error": ErrorKind.OVERFLOW},
        {},
        {"value": 1},
        {"value": -1, "kind": ValueKind.UNSIGNED},
        {"value": INT64_MAX + 1, "kind": ValueKind.SIGNED},
    ],
)
def test_operation_result_rejects_inconsistent_fields(fields: dict) -> None:
    """A result is never both success and failure, and values fit their kind."""
    with pytest.raises(ValidationError):
        OperationResult(**fields)
