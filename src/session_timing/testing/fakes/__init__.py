"""Testing fakes – deterministic doubles for the Clock port."""
from session_timing.testing.fakes.clock import (
    TEN_MINUTES,
    FixedDurationClock,
    MockClock,
    ParametricMockClock,
    TenMinuteClock,
)

__all__ = [
    "TEN_MINUTES",
    "FixedDurationClock",
    "MockClock",
    "ParametricMockClock",
    "TenMinuteClock",
]
