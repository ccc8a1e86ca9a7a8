"""Kernel – framework-agnostic building blocks."""

from session_timing.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DurationOutOfRangeError,
    InvariantViolationError,
    ScenarioFailedError,
    SessionNotStoppedError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "DurationOutOfRangeError",
    "InvariantViolationError",
    "ScenarioFailedError",
    "SessionNotStoppedError",
    "ValidationError",
]
