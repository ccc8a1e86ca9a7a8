"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                    (domain.py)
    │   ├── InvariantViolationError
    │   │   └── SessionNotStoppedError
    │   └── ValidationError
    │       └── DurationOutOfRangeError
    └── ApplicationError               (application.py)
        └── ScenarioFailedError
"""

from session_timing.kernel.errors.application import (
    ApplicationError,
    ScenarioFailedError,
)
from session_timing.kernel.errors.base import BaseError
from session_timing.kernel.errors.domain import (
    DomainError,
    DurationOutOfRangeError,
    InvariantViolationError,
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
