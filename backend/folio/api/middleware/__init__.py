"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling

Usage:
======
    from folio.api.middleware import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from folio.api.middleware.error_handler import setup_exception_handlers

__all__ = [
    "setup_exception_handlers",
]
