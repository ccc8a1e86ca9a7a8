"""Observability – structured logging."""

from session_timing.observability.logging import Logger, LoggerFactory, configure_logging, get_logger

__all__ = [
    "Logger",
    "LoggerFactory",
    "configure_logging",
    "get_logger",
]
