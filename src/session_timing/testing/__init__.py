"""Testing support – deterministic clocks for exercising sessions.

Usage::

    from session_timing.testing import MockClock

    session = Session(MockClock(90))
"""

from session_timing.testing.fakes import (
    TEN_MINUTES,
    FixedDurationClock,
    MockClock,
    ParametricMockClock,
    TenMinuteClock,
)
from session_timing.testing.generators import StepClock

__all__ = [
    "TEN_MINUTES",
    "FixedDurationClock",
    "MockClock",
    "ParametricMockClock",
    "StepClock",
    "TenMinuteClock",
]
