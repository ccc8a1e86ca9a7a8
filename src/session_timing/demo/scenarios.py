"""Demo – run a session against each clock variant and check the report.

Prints nothing on success. Any mismatch raises :class:`ScenarioFailedError`,
which :func:`main` logs before returning a non-zero exit status.
"""
from __future__ import annotations

import dataclasses
import time
from collections.abc import Callable, Sequence
from typing import TypeAlias

from session_timing.config import DemoSettings, EnvSettingsLoader
from session_timing.kernel.errors import BaseError, ScenarioFailedError
from session_timing.observability.logging import configure_logging, get_logger
from session_timing.report import display_time
from session_timing.session import Session
from session_timing.testing import MockClock, TEN_MINUTES, TenMinuteClock

log = get_logger(__name__)

Sleep: TypeAlias = Callable[[float], None]


@dataclasses.dataclass(frozen=True)
class Scenario:
    """A named check: run ``run`` and compare against ``expected``."""

    name: str
    run: Callable[[DemoSettings, Sleep], tuple[str, str]]


def _real_clock(settings: DemoSettings, sleep: Sleep) -> tuple[str, str]:
    session = Session()
    sleep(settings.delay_seconds)
    session.stop()
    elapsed = session.seconds()
    expected = display_time(settings.delay_seconds)
    # A blocking sleep can overrun by a tick of the seconds clock.
    if settings.delay_seconds <= elapsed <= settings.delay_seconds + settings.slack_seconds:
        return expected, expected
    return expected, display_time(elapsed)


def _ten_minute_clock(settings: DemoSettings, sleep: Sleep) -> tuple[str, str]:  # noqa: ARG001
    session = Session(TenMinuteClock()).stop()
    return "00:10:00", display_time(session.seconds())


def _mock_clock(settings: DemoSettings, sleep: Sleep) -> tuple[str, str]:  # noqa: ARG001
    session = Session(MockClock(TEN_MINUTES)).stop()
    return "00:10:00", display_time(session.seconds())


def _mock_clock_type(settings: DemoSettings, sleep: Sleep) -> tuple[str, str]:  # noqa: ARG001
    clock_type = MockClock.of(TEN_MINUTES)
    session = Session(clock_type()).stop()
    return "00:10:00", display_time(session.seconds())


SCENARIOS: tuple[Scenario, ...] = (
    Scenario("real_clock", _real_clock),
    Scenario("ten_minute_clock", _ten_minute_clock),
    Scenario("mock_clock", _mock_clock),
    Scenario("mock_clock_type", _mock_clock_type),
)


def run_scenarios(
    settings: DemoSettings,
    sleep: Sleep = time.sleep,
    scenarios: Sequence[Scenario] = SCENARIOS,
) -> None:
    """Run every scenario in order, stopping at the first failure."""
    for scenario in scenarios:
        expected, actual = scenario.run(settings, sleep)
        if actual != expected:
            raise ScenarioFailedError(scenario.name, expected=expected, actual=actual)
        log.debug("scenario.passed", scenario=scenario.name, elapsed=actual)


def main(*, sleep: Sleep = time.sleep) -> int:
    """Entry point for ``python -m session_timing``. Returns the exit status."""
    try:
        settings = EnvSettingsLoader().load(DemoSettings)
    except BaseError as exc:
        configure_logging()
        log.error("demo.config_failed", **exc.to_dict())
        return 1

    configure_logging(settings.log_level, json=settings.json_logs)
    try:
        run_scenarios(settings, sleep=sleep)
    except BaseError as exc:
        log.error("demo.failed", **exc.to_dict())
        return 1
    return 0


__all__ = ["SCENARIOS", "Scenario", "main", "run_scenarios"]
