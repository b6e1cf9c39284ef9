"""
API Handlers

Route handlers for the Folio API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses
- Handle HTTP-specific errors

All business logic is delegated to the service layer.
"""

from folio.api.handlers import (
    admin_handler,
    auth_handler,
    blog_handler,
    category_handler,
    contact_handler,
    health_handler,
    project_handler,
    settings_handler,
    upload_handler,
)

__all__ = [
    "admin_handler",
    "auth_handler",
    "blog_handler",
    "category_handler",
    "contact_handler",
    "health_handler",
    "project_handler",
    "settings_handler",
    "upload_handler",
]
