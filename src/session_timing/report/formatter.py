"""Report – ``HH:MM:SS`` formatting of elapsed seconds.

Hours are zero-padded to two digits and widen beyond that instead of being
truncated, so ``display_time(360000) == "100:00:00"``. Negative durations are
rejected with :class:`DurationOutOfRangeError`.
"""
from __future__ import annotations

import re

from session_timing.kernel.errors import DurationOutOfRangeError, ValidationError

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 60 * _SECONDS_PER_MINUTE

_TIME_RE = re.compile(r"([0-9]{2,}):([0-5][0-9]):([0-5][0-9])")


def display_time(total_seconds: int) -> str:
    """Render *total_seconds* as ``HH:MM:SS``.

    Raises:
        ValidationError: *total_seconds* is not an ``int``.
        DurationOutOfRangeError: *total_seconds* is negative.
    """
    if isinstance(total_seconds, bool) or not isinstance(total_seconds, int):
        raise ValidationError(
            f"total_seconds must be an int, got {type(total_seconds).__name__}",
            errors=[{"field": "total_seconds", "reason": "not_an_int"}],
        )
    if total_seconds < 0:
        raise DurationOutOfRangeError(total_seconds)

    hours = total_seconds // _SECONDS_PER_HOUR
    minutes = (total_seconds % _SECONDS_PER_HOUR) // _SECONDS_PER_MINUTE
    seconds = total_seconds % _SECONDS_PER_MINUTE
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_time(text: str) -> int:
    """Inverse of :func:`display_time`: ``"01:01:01"`` → ``3661``."""
    match = _TIME_RE.fullmatch(text)
    if match is None:
        raise ValidationError(
            f"Expected HH:MM:SS, got {text!r}",
            errors=[{"field": "text", "value": text, "reason": "bad_format"}],
        )
    hours, minutes, seconds = (int(group) for group in match.groups())
    return hours * _SECONDS_PER_HOUR + minutes * _SECONDS_PER_MINUTE + seconds


__all__ = ["display_time", "parse_time"]
