"""Logging configuration using structlog.

Logs go to stderr so exported data written to stdout can be piped.
"""

import logging
import sys
from typing import Any

import structlog


class _LazyStderrFactory:
    """Look up sys.stderr each time a logger is created.

    CliRunner swaps sys.stderr per invocation; a handle captured at
    configure() time would point at a closed stream in later tests.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=sys.stderr)


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """--verbose wins over --quiet; default is INFO."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure structlog for tablecopy.

    Args:
        verbose: Log at DEBUG, including export plan details.
        quiet: Only log warnings and errors.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_level(verbose, quiet)
        ),
        context_class=dict,
        logger_factory=_LazyStderrFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, bound to ``name`` when given.

    Call inside functions, never at import time.
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger
