"""Domain errors — session invariants and duration validation."""

from __future__ import annotations

from typing import Any

from session_timing.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a timing rule or invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """An object was used in a state that its contract forbids."""

    default_code = "invariant_violation"


class SessionNotStoppedError(InvariantViolationError):
    """Elapsed time was requested from a session that is still running."""

    default_code = "session_not_stopped"

    def __init__(self, message: str = "Session has not been stopped", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ValidationError(DomainError):
    """Input value does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class DurationOutOfRangeError(ValidationError):
    """A duration falls outside what can be rendered as ``HH:MM:SS``."""

    default_code = "duration_out_of_range"

    def __init__(self, total_seconds: int, **kwargs: Any) -> None:
        super().__init__(
            f"Duration must be >= 0 seconds, got {total_seconds}",
            errors=[{"field": "total_seconds", "value": total_seconds, "reason": "negative"}],
            **kwargs,
        )
        self.total_seconds = total_seconds


__all__ = [
    "DomainError",
    "DurationOutOfRangeError",
    "InvariantViolationError",
    "SessionNotStoppedError",
    "ValidationError",
]
