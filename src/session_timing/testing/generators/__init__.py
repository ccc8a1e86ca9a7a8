"""Testing generators – scripted clocks."""
from session_timing.testing.generators.step_clock import StepClock

__all__ = ["StepClock"]
