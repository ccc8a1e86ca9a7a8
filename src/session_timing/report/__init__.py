"""Report – human-readable rendering of elapsed session time."""
from session_timing.report.formatter import display_time, parse_time

__all__ = ["display_time", "parse_time"]
