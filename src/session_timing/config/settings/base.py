"""Config settings – Settings base class and the demo's settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from session_timing.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class DemoSettings(Settings):
    """Knobs for ``python -m session_timing``.

    Read from ``SESSION_TIMING_DELAY_SECONDS``, ``SESSION_TIMING_SLACK_SECONDS``,
    ``SESSION_TIMING_LOG_LEVEL`` and ``SESSION_TIMING_JSON_LOGS``.
    """

    _prefix: ClassVar[str] = "SESSION_TIMING"

    delay_seconds: int = 2
    slack_seconds: int = 1
    log_level: str = "WARNING"
    json_logs: bool = False

    def _validate(self) -> None:
        if self.delay_seconds < 0:
            raise InvalidSettingValueError("delay_seconds", self.delay_seconds, "must be >= 0")
        if self.slack_seconds < 0:
            raise InvalidSettingValueError("slack_seconds", self.slack_seconds, "must be >= 0")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["DemoSettings", "Settings"]
