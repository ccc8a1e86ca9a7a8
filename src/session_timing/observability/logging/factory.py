"""Observability – structlog configuration over stdlib logging."""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


class LoggerFactory:
    """Configure structlog to render through a single stderr handler."""

    @staticmethod
    def configure(level: int | str = logging.WARNING, *, json: bool = False) -> None:
        """Install the processor chain and the root handler.

        ``json=True`` renders one JSON object per line; otherwise the
        human-readable console renderer is used.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level]
            + shared_processors
            + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(_resolve_level(level))


def configure_logging(level: int | str = logging.WARNING, *, json: bool = False) -> None:
    """Shorthand for :meth:`LoggerFactory.configure`."""
    LoggerFactory.configure(level, json=json)


__all__ = ["LoggerFactory", "configure_logging"]
