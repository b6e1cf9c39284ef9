"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": "Project with id '12' not found",
        "code": "NOT_FOUND",
        "details": {...}          # only when there are details
    }

Exception Handling:
===================
1. FolioException subclasses     → Their status_code and to_dict()
2. RequestValidationError        → 400, message names the first failing field
3. Starlette HTTPException       → Its status code, {"error": detail}
4. Other exceptions              → 500 with generic message (details hidden)

Usage:
======
    from folio.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from folio.shared.core.exceptions import FolioException
from folio.shared.core.logging import logger


def _first_error(errors: list[dict[str, Any]]) -> tuple[str, str]:
    """(field, message) of the first validation error, skipping the 'body' prefix."""
    if not errors:
        return "request", "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location) or "request"
    return field, first.get("msg", "Invalid value")


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(FolioException)
    async def folio_exception_handler(
        request: Request,
        exc: FolioException,
    ) -> JSONResponse:
        """
        Handle Folio-specific exceptions.

        All custom exceptions inherit from FolioException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        These occur when the body, query or path does not match the
        expected schema.
        """
        field, message = _first_error(list(exc.errors()))
        logger.warning(
            "Validation error",
            field=field,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=400,
            content={
                "error": f"{field}: {message}",
                "code": "VALIDATION_ERROR",
                "details": {"field": field},
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Plain HTTP errors (404 for unknown routes, 405, ...)."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )
