"""Pytest fixtures for shared test state."""

from __future__ import annotations

import pytest

from intcalc.recorder import CallRecorder


@pytest.fixture
def recorder() -> CallRecorder:
    """Return an empty call recorder."""
    return CallRecorder()
