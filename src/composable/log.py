"""
Logging setup — structlog configuration for applications using composable.

The composition and currying plumbing never logs. Log events only come
from stages a caller opted into with ComposableFn.traced().
"""

from __future__ import annotations

import logging

import structlog

from composable.config import get_settings


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog to render events as coloured console lines on stdout.

    There is no JSON or file output. The level comes from `log_level`, or
    from COMPOSABLE_LOG_LEVEL when none is given. A name the logging module
    doesn't define is replaced by INFO.
    """
    level_name = (log_level or get_settings().log_level).upper()
    level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "composable") -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger with `logger=name` bound into every event."""
    return structlog.get_logger(name).bind(logger=name)
