"""Structured logging helpers."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: int | str = logging.INFO, *, json_logs: bool = True) -> None:
    """Route structlog output to stderr, leaving stdout to the search screen.

    ``json_logs=False`` switches to the plain key/value console renderer used
    in the ``dev`` environment.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def search_context(query: str, sequence: int):
    """Bind ``query`` and ``sequence`` to every log line emitted inside the block."""

    return structlog.contextvars.bound_contextvars(query=query, search_sequence=sequence)


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger", "search_context"]
