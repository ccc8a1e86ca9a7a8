"""Observability – get_logger helper and the library's quiet default."""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def install_quiet_default() -> None:
    """Drop events below WARNING until :func:`configure_logging` runs.

    Leaves any configuration the application already installed untouched.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    install_quiet_default()
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger", "install_quiet_default"]
