"""
Structured logging configuration using structlog.

This module sets up structlog for console or JSON logging with context binding.
Library modules log rewrite events at debug level; applications call
``setup_logging()`` to filter them by ``settings.log_level``.
"""

import logging
import sys

import structlog

from .config import settings


def setup_logging() -> None:
    """
    Configure structlog for structured logging.

    Sets up processors for:
    - Context variable merging
    - Log level addition
    - Exception info rendering
    - Timestamp addition
    - JSON or console rendering based on settings

    Output goes to stderr, leaving stdout free for message bytes.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
