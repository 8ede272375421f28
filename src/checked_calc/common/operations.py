"""
Checked integer arithmetic.

Every function computes the exact result with Python integers and range-checks
each elementary step against the 64-bit representation of its result, so an
overflow is reported instead of wrapping. None of them raise: failures come
back as an OperationResult carrying an ErrorKind.
"""
from collections.abc import Callable

from checked_calc.common.logger import logger
from checked_calc.common.models import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    ErrorKind,
    Operation,
    OperationRequest,
    OperationResult,
    ValueKind,
)


def _fits(value: int, kind: ValueKind) -> bool:
    """
    Check that a value is representable in the given 64-bit kind.

    :param int value: Exact value
    :param ValueKind kind: Target representation

    :return: True if the value fits
    :rtype: bool
    """
    if kind is ValueKind.SIGNED:
        return INT64_MIN <= value <= INT64_MAX
    return 0 <= value <= UINT64_MAX


def _signed(value: int) -> OperationResult:
    if not _fits(value, ValueKind.SIGNED):
        return OperationResult.failure(ErrorKind.OVERFLOW)
    return OperationResult.ok_signed(value)


def checked_add(a: int, b: int) -> OperationResult:
    """Return a + b, or overflow."""
    return _signed(a + b)


def checked_sub(a: int, b: int) -> OperationResult:
    """Return a - b, or overflow."""
    return _signed(a - b)


def checked_mul(a: int, b: int) -> OperationResult:
    """Return a * b, or overflow."""
    return _signed(a * b)


def checked_div(a: int, b: int) -> OperationResult:
    """
    Divide a by b, truncating toward zero.

    Python's ``//`` floors, so the quotient is built from the magnitudes and the
    sign is applied afterwards. ``INT64_MIN / -1`` is the only quotient that does
    not fit and is reported as overflow.

    :param int a: Dividend
    :param int b: Divisor

    :return: Quotient, divide-by-zero or overflow
    :rtype: OperationResult
    """
    if b == 0:
        return OperationResult.failure(ErrorKind.DIVIDE_BY_ZERO)
    quotient: int = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return _signed(quotient)


def checked_pow(base: int, exponent: int) -> OperationResult:
    """
    Raise base to a non-negative exponent by repeated squaring.

    A non-negative base gives an unsigned result, a negative base a signed one.
    Only the squares that are actually multiplied in are computed, so any
    square leaving the range implies the final result leaves it too.

    :param int base: Base
    :param int exponent: Exponent, must be >= 0

    :return: Power, domain-invalid or overflow
    :rtype: OperationResult
    """
    if exponent < 0:
        return OperationResult.failure(ErrorKind.DOMAIN_INVALID)

    kind = ValueKind.UNSIGNED if base >= 0 else ValueKind.SIGNED
    result: int = 1
    square: int = base
    remaining: int = exponent
    while remaining:
        if remaining & 1:
            result *= square
            if not _fits(result, kind):
                return OperationResult.failure(ErrorKind.OVERFLOW)
        remaining >>= 1
        if not remaining:
            break
        square *= square
        if not _fits(square, kind):
            return OperationResult.failure(ErrorKind.OVERFLOW)

    return OperationResult(value=result, kind=kind)


def checked_fact(n: int) -> OperationResult:
    """
    Compute n! as an unsigned 64-bit value, with 0! = 1.

    The loop stops at the first product that leaves the range, so it never runs
    more than 21 steps whatever n is.

    :param int n: Operand, must be >= 0

    :return: Factorial, domain-invalid or overflow
    :rtype: OperationResult
    """
    if n < 0:
        return OperationResult.failure(ErrorKind.DOMAIN_INVALID)

    result: int = 1
    for factor in range(2, n + 1):
        result *= factor
        if not _fits(result, ValueKind.UNSIGNED):
            return OperationResult.failure(ErrorKind.OVERFLOW)
    return OperationResult.ok_unsigned(result)


# Fixed operation table: one checked function per variant
OPERATIONS: dict[Operation, Callable[..., OperationResult]] = {
    Operation.ADD: checked_add,
    Operation.SUB: checked_sub,
    Operation.MUL: checked_mul,
    Operation.DIV: checked_div,
    Operation.POW: checked_pow,
    Operation.FACT: checked_fact,
}


def evaluate(request: OperationRequest) -> OperationResult:
    """
    Run a validated request through the operation table.

    :param OperationRequest request: Request built by the argument resolver

    :return: Result of the checked operation
    :rtype: OperationResult
    """
    fn = OPERATIONS[request.op]
    if request.op.needs_b:
        result = fn(request.a, request.b)
    else:
        result = fn(request.a)

    if result.is_ok:
        logger.debug(f"{request.op.display_name}({request.a}, {request.b}) = {result.value} [{result.kind.value}]")
    else:
        logger.info(f"{request.op.display_name}({request.a}, {request.b}) failed: {result.error.value}")
    return result
