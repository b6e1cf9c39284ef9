"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from folio.shared.core.logging import logger, get_logger
    from folio.shared.core.exceptions import FolioException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from folio.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
)
from folio.shared.core.exceptions import (
    FolioException,
    AuthenticationError,
    InvalidCredentialError,
    AuthorizationError,
    InvalidTokenError,
    NotFoundError,
    UserNotFoundError,
    CategoryNotFoundError,
    ProjectNotFoundError,
    BlogPostNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    # Exceptions
    "FolioException",
    "AuthenticationError",
    "InvalidCredentialError",
    "AuthorizationError",
    "InvalidTokenError",
    "NotFoundError",
    "UserNotFoundError",
    "CategoryNotFoundError",
    "ProjectNotFoundError",
    "BlogPostNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
]
