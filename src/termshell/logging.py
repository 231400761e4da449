"""Structured logging for termshell's own diagnostics, using structlog.

These events (``shell_created``, ``shell_write_failed``) describe the Shell
itself and never carry status line text. They always go to stderr.
"""

import logging as stdlib_logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger


def add_log_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the log level to the event dict."""
    if method_name == "warn":
        # Translate "warn" to "warning"
        event_dict["level"] = "warning"
    else:
        event_dict["level"] = method_name
    return event_dict


def level_number(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give WARNING."""
    number = getattr(stdlib_logging, level.upper(), None)
    return number if isinstance(number, int) else stdlib_logging.WARNING


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure structlog for termshell's diagnostics.

    Diagnostics are filtered out entirely at the default level, so hosts that
    never ask for them see nothing on stderr.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), any case.
        json_output: Render one JSON object per event instead of console lines.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_number(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a termshell logger, bound to ``name`` (usually ``__name__``)."""
    return structlog.get_logger(name)
