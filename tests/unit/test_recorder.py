"""Unit tests for CallRecorder.

This test suite validates call recording around calculator operations.
"""

import json

import pytest

from intcalc.arithmetic import add, divide
from intcalc.recorder import CallRecorder


def boom(a: int, b: int) -> int:
    """Test function: always raises."""
    raise RuntimeError("boom")


def test_wrap_function_returns_callable(recorder: CallRecorder) -> None:
    """Test that wrapping a function returns a callable."""
    wrapped = recorder.wrap(add)
    assert callable(wrapped)
    assert wrapped.__name__ == "add"


def test_wrapped_function_preserves_behavior(recorder: CallRecorder) -> None:
    """Test that wrapped function preserves original behavior."""
    assert recorder.wrap(add)(2, 3) == 5
    assert recorder.wrap(divide)(9, 3).value == 3


def test_wrapped_function_records_call(recorder: CallRecorder) -> None:
    """Test that wrapped function records the call."""
    recorder.wrap(add)(2, 3)

    records = recorder.get_call_records()
    assert len(records) == 1
    assert records[0]["function_name"] == "add"
    assert records[0]["args"] == {"a": 2, "b": 3}
    assert records[0]["result"] == 5
    assert "error" not in records[0]


def test_keyword_arguments_are_bound(recorder: CallRecorder) -> None:
    """Test that keyword arguments are recorded by parameter name."""
    recorder.wrap(add)(b=3, a=2)
    assert recorder.get_call_records()[0]["args"] == {"a": 2, "b": 3}


def test_successful_result_is_unpacked(recorder: CallRecorder) -> None:
    """Test that a successful CalcResult is recorded as its value."""
    recorder.wrap(divide)(10, 5)
    assert recorder.get_call_records()[0]["result"] == 2


def test_failed_result_recorded_as_error(recorder: CallRecorder) -> None:
    """Test that a failed CalcResult is recorded as an error."""
    result = recorder.wrap(divide)(10, 0)

    assert not result.ok
    record = recorder.get_call_records()[0]
    assert "result" not in record
    assert record["error"] == {
        "type": "DivisionByZeroError",
        "message": "Error: Division by zero!",
    }


def test_raised_exception_recorded_and_reraised(recorder: CallRecorder) -> None:
    """Test that wrapped function records and re-raises exceptions."""
    with pytest.raises(RuntimeError):
        recorder.wrap(boom)(1, 2)

    record = recorder.get_call_records()[0]
    assert record["error"] == {"type": "RuntimeError", "message": "boom"}


def test_observers_receive_events(recorder: CallRecorder) -> None:
    """Test that observers receive events until removed."""
    events = []

    def observer(event_type, record):
        events.append((event_type, record["function_name"]))

    recorder.add_observer(observer)
    recorder.add_observer(observer)
    recorder.wrap(add)(1, 1)
    recorder.wrap(divide)(1, 0)
    recorder.remove_observer(observer)
    recorder.wrap(add)(1, 1)

    assert events == [("call_complete", "add"), ("call_error", "divide")]


def test_filter_by_function(recorder: CallRecorder) -> None:
    """Test filtering call records by function name."""
    wrapped_add = recorder.wrap(add)
    wrapped_divide = recorder.wrap(divide)
    wrapped_add(1, 2)
    wrapped_divide(4, 2)
    wrapped_add(3, 4)

    records = recorder.filter_by_function("add")
    assert [r["args"] for r in records] == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


def test_get_call_records_returns_copy(recorder: CallRecorder) -> None:
    """Test that callers cannot mutate the recorded history."""
    recorder.wrap(add)(1, 2)
    recorder.get_call_records().clear()
    assert len(recorder.get_call_records()) == 1


def test_clear(recorder: CallRecorder) -> None:
    """Test clearing recorded calls."""
    recorder.wrap(add)(1, 2)
    recorder.clear()
    assert recorder.get_call_records() == []


def test_export_history_json(recorder: CallRecorder) -> None:
    """Test exporting call history as JSON."""
    recorder.wrap(add)(1, 2)
    recorder.wrap(divide)(1, 0)

    exported = json.loads(recorder.export_history())
    assert [r["function_name"] for r in exported] == ["add", "divide"]
    assert exported[1]["error"]["type"] == "DivisionByZeroError"


def test_export_history_unsupported_format(recorder: CallRecorder) -> None:
    """Test that unsupported export formats raise ValueError."""
    with pytest.raises(ValueError, match="Unsupported export format"):
        recorder.export_history(format="xml")
