"""Session – captures a start instant on construction and a stop instant on demand."""
from __future__ import annotations

from enum import StrEnum

from session_timing.kernel.errors import SessionNotStoppedError
from session_timing.kernel.time import Clock, Instant, RealClock
from session_timing.kernel.types import Err, Ok, Result
from session_timing.observability.logging import Logger, get_logger


class SessionState(StrEnum):
    RUNNING = "running"
    STOPPED = "stopped"


class Session:
    """One start/stop cycle measured against an injected :class:`Clock`.

    The session keeps its own reference to the clock, so the clock lives at
    least as long as the session does. Sessions are not restartable: once
    stopped they stay stopped, although calling :meth:`stop` again re-reads
    the clock and replaces the stop instant.

    Example::

        session = Session(MockClock(600))
        session.stop()
        session.seconds()  # 600
    """

    __slots__ = ("_clock", "_log", "_start_time", "_stop_time")

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else RealClock()
        self._log: Logger = get_logger(__name__, clock=type(self._clock).__name__)
        self._start_time: Instant = self._clock.start()
        self._stop_time: Instant | None = None
        self._log.debug("session.started", start_time=self._start_time)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def start_time(self) -> Instant:
        return self._start_time

    @property
    def stop_time(self) -> Instant | None:
        """Stop instant, or ``None`` while the session is running."""
        return self._stop_time

    @property
    def state(self) -> SessionState:
        return SessionState.RUNNING if self._stop_time is None else SessionState.STOPPED

    def stop(self) -> Session:
        """Read the clock's stop instant and fix the session's end point."""
        self._stop_time = self._clock.stop()
        self._log.debug("session.stopped", start_time=self._start_time, stop_time=self._stop_time)
        return self

    def seconds(self) -> int:
        """Elapsed seconds between start and stop.

        Raises:
            SessionNotStoppedError: :meth:`stop` has not been called yet.
        """
        if self._stop_time is None:
            raise SessionNotStoppedError(
                detail={"clock": type(self._clock).__name__, "start_time": self._start_time},
            )
        return self._stop_time - self._start_time

    def try_seconds(self) -> Result[int, SessionNotStoppedError]:
        """Like :meth:`seconds` but returns ``Err`` instead of raising."""
        try:
            return Ok(self.seconds())
        except SessionNotStoppedError as exc:
            return Err(exc)

    def __repr__(self) -> str:
        return (
            f"Session(clock={self._clock!r}, state={self.state.value!r}, "
            f"start_time={self._start_time!r}, stop_time={self._stop_time!r})"
        )


__all__ = ["Session", "SessionState"]
