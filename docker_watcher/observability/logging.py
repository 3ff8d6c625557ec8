"""Structured logging configuration using structlog.

Log lines go to stderr; stdout belongs to the console sink and the debug
dump.  ``container_context`` binds a container id to every line logged
while one event is being handled.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

LOG_FORMATS = ("auto", "json", "console")


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "auto":
        log_format = "console" if sys.stderr.isatty() else "json"
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(level: str = "info", log_format: str = "json") -> None:
    """Configure structlog output to stderr.

    Args:
        level:      Minimum level name (debug, info, warning, error).
        log_format: ``json`` lines, human ``console`` lines, or ``auto``
                    (console when stderr is a terminal).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


@contextmanager
def container_context(container_id: str, action: str) -> Iterator[None]:
    """Attach ``container_id`` and ``action`` to log lines emitted inside the block."""
    with structlog.contextvars.bound_contextvars(container_id=container_id, action=action):
        yield


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
