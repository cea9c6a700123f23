"""intcalc.

32-bit signed integer arithmetic with truncating division and an explicit
result type for division by zero.
"""

__version__ = "0.1.0"
__all__ = [
    "CalcResult",
    "CalculatorError",
    "CallRecorder",
    "DivisionByZeroError",
    "OPERATIONS",
    "OperandRangeError",
    "add",
    "divide",
    "modulo",
    "multiply",
    "subtract",
    "wrap_i32",
]

from .arithmetic import OPERATIONS, add, divide, modulo, multiply, subtract, wrap_i32
from .exceptions import CalculatorError, DivisionByZeroError, OperandRangeError
from .recorder import CallRecorder
from .result import CalcResult
