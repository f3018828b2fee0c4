"""
Logging configuration using structlog for structured, JSON-based logging.

Log lines go to stderr so they never mix with command output on stdout.
"""

import logging
import sys
from typing import Any

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging with JSON output.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__ from calling module)

    Example:
        >>> log = get_logger(__name__)
        >>> log.warning("repo_info_failed", file="src/a.go", error="No remotes")
    """
    return structlog.get_logger(name)


def configure_default_logging() -> None:
    """Drop structlog's debug and info output when nothing configured it.

    structlog prints every level by default. Library callers that never call
    configure_logging get warnings and errors only; an existing configuration
    is left alone.
    """
    if not structlog.is_configured():
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
