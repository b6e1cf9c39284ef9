"""
Logging Configuration

Structured logging for Folio using structlog on top of the stdlib logging module.

Log Output:
===========
Development:
    2024-05-02T09:14:11Z [info     ] Project created   [folio] project_id=12 tags=2

Production (JSON):
    {"timestamp": "2024-05-02T09:14:11Z", "level": "info", "event": "Project created", "project_id": 12}

Rules:
======
- Log events as short sentences with key-value context
- Never log passwords, password hashes or session tokens
- Request-scoped values (path, user_id) go through log_context()

Usage:
======
    from folio.shared.core.logging import logger, get_logger, log_context

    logger.info("Project created", project_id=project.id)

    auth_logger = get_logger("folio.auth")
    auth_logger.warning("Login rejected", reason="invalid_password")
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from folio.config.settings import settings


def setup_logging(level: str = settings.LOG_LEVEL, json_output: bool = not settings.is_development) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Minimum log level name (DEBUG, INFO, ...)
        json_output: Render JSON lines instead of coloured console output
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors: list[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to every log call made later in this context.

    Example:
        log_context(path=request.url.path, user_id=user.id)
        logger.info("Settings updated")  # includes path and user_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop all values bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("folio")
