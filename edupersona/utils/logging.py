# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

The engine is a library, so nothing is configured on import. Host
applications (or tests) call setup_logging() once at startup; until then
structlog's defaults apply and every module logger still works.

Example:
    >>> from edupersona.utils.logging import setup_logging, get_logger
    >>> from edupersona.core.config import get_settings
    >>> setup_logging(get_settings())
    >>> logger = get_logger(__name__)
    >>> logger.info("tutor_selected", learner_id="learner-1", tutor_id="guru_odia")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from edupersona.core.config.settings import Settings


def setup_logging(settings: "Settings") -> None:
    """Configure structlog: console output in development or debug, JSON otherwise."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development or settings.debug:
        processors: list[Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    # PyYAML and friends stay quiet unless something goes wrong
    for logger_name in ["yaml", "asyncio"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.getLogger("edupersona").setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for a module."""
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Tag every later log call in this context, e.g. with a batch id."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
