"""Application-layer errors — failures of the driver and its collaborators."""

from __future__ import annotations

from typing import Any

from session_timing.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ScenarioFailedError(ApplicationError):
    """A demo scenario produced a different elapsed time than expected."""

    default_code = "scenario_failed"

    def __init__(
        self,
        scenario: str,
        *,
        expected: str,
        actual: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Scenario '{scenario}' expected {expected!r}, got {actual!r}",
            detail={"scenario": scenario, "expected": expected, "actual": actual},
            **kwargs,
        )
        self.scenario = scenario
        self.expected = expected
        self.actual = actual


__all__ = ["ApplicationError", "ScenarioFailedError"]
