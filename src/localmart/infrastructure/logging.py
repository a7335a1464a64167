"""Logging configuration.

structlog on top of the stdlib ``localmart`` logger, written to stderr so
CLI output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

import structlog

_HANDLER_NAME = "localmart-stderr"


def setup_stdlib_logging(level: str) -> None:
    """Point the ``localmart`` logger at stderr, replacing any earlier setup."""
    app_logger = logging.getLogger("localmart")
    app_logger.setLevel(level)
    app_logger.propagate = False
    app_logger.handlers = [h for h in app_logger.handlers if h.get_name() != _HANDLER_NAME]

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    app_logger.addHandler(handler)


def setup_structlog(fmt: str) -> None:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging(level)
    setup_structlog(fmt)
