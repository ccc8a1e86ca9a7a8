"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from typing import Protocol, TypeAlias, runtime_checkable

Instant: TypeAlias = int
"""Whole seconds since an unspecified epoch."""


@runtime_checkable
class Clock(Protocol):
    """Port: time source injected into a session.

    ``start`` is read when a session begins and ``stop`` when it ends.
    Neither may fail or mutate state.
    """

    def start(self) -> Instant: ...
    def stop(self) -> Instant: ...


def now() -> Instant:
    """Current wall-clock time truncated to whole seconds."""
    return int(time.time())


class RealClock:
    """Production clock that delegates both reads to :func:`now`."""

    def start(self) -> Instant:
        return self.stop()

    def stop(self) -> Instant:
        return now()

    def __repr__(self) -> str:
        return "RealClock()"


__all__ = ["Clock", "Instant", "RealClock", "now"]
