"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    FolioException (base, 500)
       │
       ├── AuthenticationError (401)      ← No credential presented
       │      └── InvalidCredentialError  ← Wrong password at login
       ├── AuthorizationError (403)       ← Invalid token, or role too low
       ├── InvalidTokenError (403)        ← Session token expired/tampered/malformed
       ├── NotFoundError (404)
       │      ├── UserNotFoundError
       │      ├── CategoryNotFoundError
       │      ├── ProjectNotFoundError
       │      └── BlogPostNotFoundError
       ├── ValidationError (400)          ← Missing or malformed input
       └── ConflictError (409)            ← Uniqueness violation
              └── DuplicateResourceError

Usage:
======
    from folio.shared.core.exceptions import NotFoundError, ValidationError

    raise ProjectNotFoundError(project_id)
    # → 404 {"error": "Project with id '7' not found", "code": "NOT_FOUND"}

    raise ValidationError("title is required", details={"field": "title"})

Response Format:
================
The error handler middleware renders every FolioException as:
    {
        "error": "Project with id '7' not found",
        "code": "NOT_FOUND",
        "details": {...}        # only present when the exception carries details
    }
"""

from typing import Any, Optional


class FolioException(Exception):
    """
    Base exception for all Folio application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context safe to show to clients
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the JSON body returned to clients."""
        body: dict[str, Any] = {
            "error": self.message,
            "code": self.error_code,
        }
        if self.details:
            body["details"] = self.details
        return body


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(FolioException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when no credential was presented at all.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class InvalidCredentialError(AuthenticationError):
    """Password did not match the stored hash."""

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message=message)
        self.error_code = "INVALID_CREDENTIAL"


class AuthorizationError(FolioException):
    """
    Authorization failed error (403 Forbidden).

    Raised when a credential is present but invalid, or the caller's
    role does not allow the operation.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


class InvalidTokenError(FolioException):
    """
    Session token failed validation.

    Expired, tampered and malformed tokens all raise this same error so
    callers cannot tell the cases apart.
    """

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="INVALID_TOKEN",
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(FolioException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Project", 7)
        # Message: "Project with id '7' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: Optional[Any] = None) -> None:
        super().__init__(resource="User", resource_id=user_id)


class CategoryNotFoundError(NotFoundError):
    """Category not found error."""

    def __init__(self, category_id: Any) -> None:
        super().__init__(resource="Category", resource_id=category_id)


class ProjectNotFoundError(NotFoundError):
    """Project not found error."""

    def __init__(self, project_id: Any) -> None:
        super().__init__(resource="Project", resource_id=project_id)


class BlogPostNotFoundError(NotFoundError):
    """Blog post not found error."""

    def __init__(self, post_ref: Any) -> None:
        super().__init__(resource="Blog post", resource_id=post_ref)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(FolioException):
    """
    Validation error (400 Bad Request).

    Raised before any write happens when input data is missing or malformed.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(FolioException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("A post with this slug already exists", details={"slug": slug})
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Raised when creating a resource whose unique key is already taken."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
