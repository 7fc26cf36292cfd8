"""
Logging Configuration

Structured logging on top of structlog and the standard logging module.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] Item added to collection       collection_id=3 item_id=7 position=2

Other environments (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "Item added to collection", ...}

Usage:
======
    from encore.shared.core.logging import logger, get_logger, log_context

    logger.info("Collection reordered", collection_id=collection_id, size=len(ordering))

    db_logger = get_logger("encore.db")
    db_logger.debug("Engine created", dialect="sqlite")

    # Bind request-scoped values (done by RequestContextMiddleware)
    log_context(request_id=request_id, path=path)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from encore.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development gets colored console output, every other environment
    renders one JSON object per line.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Values live in context variables, so each request (asyncio task)
    sees only its own context.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Call this at the end of request processing so context does not
    leak into unrelated log lines.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("encore")
