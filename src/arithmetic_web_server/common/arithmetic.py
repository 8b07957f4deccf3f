"""Arithmetic operations exposed by the web API."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, Dict, Union

Number = Union[int, float]

# Type alias for operation functions (taking two ints, returning a number)
OperationFn: ABCCallable[[int, int], Number] = Callable[[int, int], Number]

DIVISION_BY_ZERO_MESSAGE: str = "Division by zero is not allowed"


class DivisionByZeroError(ValueError):
    """Raised when the divisor of a division is zero."""

    def __init__(self, message: str = DIVISION_BY_ZERO_MESSAGE) -> None:
        super().__init__(message)


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return operator.add(a, b)


def subtract(a: int, b: int) -> int:
    """Return the difference of two integers."""
    return operator.sub(a, b)


def multiply(a: int, b: int) -> int:
    """Return the product of two integers."""
    return operator.mul(a, b)


def divide(a: int, b: int) -> float:
    """
    Divide two integers.

    :param int a: Dividend
    :param int b: Divisor

    :return: Floating-point quotient
    :rtype: float
    :raises DivisionByZeroError: If the divisor is zero
    """
    if b == 0:
        raise DivisionByZeroError()
    return operator.truediv(a, b)


# Mapping of operation names (as used in URLs) to functions
OPERATIONS: Dict[str, OperationFn] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def compute(operation: str, a: int, b: int) -> Number:
    """
    Apply the named operation to two operands.

    :param str operation: One of the keys of OPERATIONS
    :param int a: Left operand
    :param int b: Right operand

    :return: Result of the operation
    :rtype: Number
    :raises ValueError: If the operation is unknown or the division is by zero
    """
    try:
        fn: OperationFn = OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Unknown operation: {operation!r}") from None
    return fn(a, b)
