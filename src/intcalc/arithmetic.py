"""Arithmetic over 32-bit signed integers.

Results wrap around in two's complement, so every operation maps two
32-bit operands to a 32-bit result. Division and remainder truncate toward
zero, and a zero divisor is reported through the returned ``CalcResult``
instead of being raised or printed.

Functions:
    add: Wrapping addition
    subtract: Wrapping subtraction
    multiply: Wrapping multiplication
    divide: Truncating division, guarded against a zero divisor
    modulo: Truncating remainder, guarded against a zero divisor
"""

import logging
from typing import Callable, Union

from intcalc.exceptions import DivisionByZeroError, OperandRangeError
from intcalc.result import CalcResult

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_MODULUS = 2**32


def wrap_i32(n: int) -> int:
    """Reduce an integer into the signed 32-bit range."""
    n = (n - INT32_MIN) % _MODULUS
    return n + INT32_MIN


def _check_operands(a: int, b: int) -> None:
    for name, value in (("a", a), ("b", b)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise OperandRangeError(name, value)
        if not INT32_MIN <= value <= INT32_MAX:
            raise OperandRangeError(name, value)


def add(a: int, b: int) -> int:
    """Add two integers.

    Args:
        a: First integer
        b: Second integer

    Returns:
        The sum of a and b, wrapped to 32 bits
    """
    _check_operands(a, b)
    return wrap_i32(a + b)


def subtract(a: int, b: int) -> int:
    """Subtract b from a, wrapped to 32 bits."""
    _check_operands(a, b)
    return wrap_i32(a - b)


def multiply(a: int, b: int) -> int:
    """Multiply two integers, wrapped to 32 bits."""
    _check_operands(a, b)
    return wrap_i32(a * b)


def _truncating_quotient(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def divide(a: int, b: int) -> CalcResult:
    """Integer division of two integers, rounding toward zero.

    Args:
        a: Numerator
        b: Denominator

    Returns:
        A result holding the quotient, or a DivisionByZeroError if b is zero.
        INT32_MIN / -1 wraps to INT32_MIN.
    """
    _check_operands(a, b)
    if b == 0:
        logger.debug("divide(%d, 0): zero divisor", a)
        return CalcResult.failure(DivisionByZeroError("divide"))
    return CalcResult.success(wrap_i32(_truncating_quotient(a, b)))


def modulo(a: int, b: int) -> CalcResult:
    """Remainder of truncating division; the sign follows the dividend.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        A result holding the remainder, or a DivisionByZeroError if b is zero.
    """
    _check_operands(a, b)
    if b == 0:
        logger.debug("modulo(%d, 0): zero divisor", a)
        return CalcResult.failure(DivisionByZeroError("modulo"))
    return CalcResult.success(a - b * _truncating_quotient(a, b))


Operation = Callable[[int, int], Union[int, CalcResult]]

# Demonstration order.
OPERATIONS: dict[str, Operation] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
    "%": modulo,
}
