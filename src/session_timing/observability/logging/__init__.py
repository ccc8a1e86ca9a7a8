"""Observability – structured logging helpers."""
from session_timing.observability.logging.factory import LoggerFactory, configure_logging
from session_timing.observability.logging.processors import get_logger, install_quiet_default
from session_timing.observability.logging.protocol import Logger

__all__ = [
    "Logger",
    "LoggerFactory",
    "configure_logging",
    "get_logger",
    "install_quiet_default",
]
