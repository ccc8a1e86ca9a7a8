"""Kernel time – Clock port + production implementation."""
from session_timing.kernel.time.clock import Clock, Instant, RealClock, now

__all__ = ["Clock", "Instant", "RealClock", "now"]
