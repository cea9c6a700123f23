"""Console presentation of calculator results."""

from typing import Union

from intcalc.result import CalcResult

BANNER = "Simple Integer Calculator"

# Shown in place of the value of a failed operation.
FAILED_VALUE = 0


def format_operation(a: int, symbol: str, b: int, value: int) -> str:
    return f"{a} {symbol} {b} = {value}"


def render(a: int, symbol: str, b: int, result: Union[int, CalcResult]) -> list[str]:
    """Render one operation as output lines.

    Args:
        a: Left operand.
        symbol: Conventional operator symbol.
        b: Right operand.
        result: A plain value, or a CalcResult from a guarded operation.

    Returns:
        The diagnostic line (failed results only) followed by the operation line.
    """
    if not isinstance(result, CalcResult):
        return [format_operation(a, symbol, b, result)]
    lines = []
    if not result.ok:
        lines.append(str(result.error))
    lines.append(format_operation(a, symbol, b, result.unwrap_or(FAILED_VALUE)))
    return lines
