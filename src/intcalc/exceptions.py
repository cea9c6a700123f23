"""Custom exceptions for integer arithmetic."""

from typing import Any


class CalculatorError(Exception):
    """Base class for calculator errors."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Reported when divide or modulo is given a zero divisor."""

    MESSAGES = {
        "divide": "Error: Division by zero!",
        "modulo": "Error: Division by zero in modulo operation!",
    }

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(self.MESSAGES[operation])


class OperandRangeError(CalculatorError, ValueError):
    """Raised when an operand is not a 32-bit signed integer."""

    def __init__(self, name: str, value: Any) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Operand {name}={value!r} is not a 32-bit signed integer")
