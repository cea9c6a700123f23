"""Result type for operations that can fail without raising."""

from dataclasses import dataclass
from typing import Optional

from intcalc.exceptions import CalculatorError


@dataclass(frozen=True)
class CalcResult:
    """Either a computed value or the error that prevented it.

    Exactly one of ``value`` and ``error`` is set. A computed zero has
    ``value == 0`` and ``error is None``.

    Attributes:
        value: The computed integer, or None on failure.
        error: The error describing the failure, or None on success.
    """

    value: Optional[int] = None
    error: Optional[CalculatorError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("CalcResult needs exactly one of value or error")

    @classmethod
    def success(cls, value: int) -> "CalcResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: CalculatorError) -> "CalcResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> int:
        """Return the value.

        Raises:
            CalculatorError: The carried error, if the operation failed.
        """
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: int) -> int:
        """Return the value, or ``default`` if the operation failed."""
        if self.error is not None:
            return default
        return self.value
