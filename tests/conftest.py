"""Shared fixtures for the session-timing test suite."""

from __future__ import annotations

import pytest

from session_timing.testing import MockClock, StepClock, TenMinuteClock


@pytest.fixture
def ten_minute_clock() -> TenMinuteClock:
    return TenMinuteClock()


@pytest.fixture
def mock_clock() -> MockClock:
    return MockClock(90)


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock(start=100, step=5)
