"""Call recording for calculator operations.

This module wraps operations and records their calls, arguments, and
outcomes in memory, notifying observers as each call completes.
"""

import functools
import inspect
import json
import time
from typing import Any, Callable

from intcalc.result import CalcResult


class CallRecorder:
    """Function call recorder.

    Wrapped operations record one entry per call. A ``CalcResult`` return is
    unpacked so that a failed result is recorded as an error rather than a
    value.

    Attributes:
        records: Recorded calls, oldest first.
    """

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []
        self._observers: list[Callable[[str, dict[str, Any]], None]] = []

    def wrap(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap a function to record its calls.

        Args:
            func: The function to wrap.

        Returns:
            The wrapped function.
        """
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            timestamp = time.time()
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()
            record: dict[str, Any] = {
                "function_name": func.__name__,
                "args": dict(bound_args.arguments),
                "timestamp": timestamp,
            }

            try:
                result = func(*args, **kwargs)
            except Exception as e:
                record["error"] = _error_info(e)
                self._record("call_error", record)
                raise

            if isinstance(result, CalcResult):
                if result.ok:
                    record["result"] = result.value
                    self._record("call_complete", record)
                else:
                    record["error"] = _error_info(result.error)
                    self._record("call_error", record)
            else:
                record["result"] = result
                self._record("call_complete", record)
            return result

        return wrapper

    def _record(self, event_type: str, record: dict[str, Any]) -> None:
        self.records.append(record)
        for observer in self._observers:
            observer(event_type, record)

    def get_call_records(self) -> list[dict[str, Any]]:
        """Get all recorded calls.

        Returns:
            A copy of the recorded calls, oldest first.
        """
        return list(self.records)

    def filter_by_function(self, function_name: str) -> list[dict[str, Any]]:
        """Filter call records by function name."""
        return [r for r in self.records if r["function_name"] == function_name]

    def add_observer(self, observer: Callable[[str, dict[str, Any]], None]) -> None:
        """Add an observer to receive call events.

        Args:
            observer: Callback that receives event_type and the call record.
                      event_type is "call_complete" or "call_error".
        """
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: Callable[[str, dict[str, Any]], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def clear(self) -> None:
        """Clear all recorded calls."""
        self.records.clear()

    def export_history(self, format: str = "json") -> str:
        """Export call history for offline analysis.

        Args:
            format: Export format. Currently only "json" is supported.

        Returns:
            Exported data as a string in the specified format.

        Raises:
            ValueError: If format is not supported.
        """
        if format != "json":
            raise ValueError(f"Unsupported export format: {format}")
        return json.dumps(self.records, indent=2)


def _error_info(error: BaseException) -> dict[str, str]:
    return {"type": type(error).__name__, "message": str(error)}
