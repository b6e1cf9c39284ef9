"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- Standard Responses: MessageResponse, CreatedResponse, ErrorResponse
- HealthResponse
- Input helpers: NameList (accepts a list or a comma-separated string)

Usage:
======
    from folio.shared.schemas.common import BaseSchema, MessageResponse

    class CategoryResponse(BaseSchema):
        id: int
        name: str

    # In route handler
    return MessageResponse(message="Category deleted successfully")
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas should inherit from this class.
    Provides:
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT HELPERS
# ═══════════════════════════════════════════════════════════════════════════════


def _split_names(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


# Tags and keywords: ["AI", "Web Dev"] or "AI, Web Dev"
NameList = Annotated[list[str], BeforeValidator(_split_names)]


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Simple message response for success confirmations."""

    message: str


class CreatedResponse(MessageResponse):
    """Confirmation carrying the id of the created row."""

    id: int


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format.

    Example:
        {
            "error": "Project with id '12' not found",
            "code": "NOT_FOUND"
        }
    """

    error: str = Field(description="Human-readable error message")
    code: Optional[str] = Field(default=None, description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "folio"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ═══════════════════════════════════════════════════════════════════════════════
# MIXINS
# ═══════════════════════════════════════════════════════════════════════════════


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields in responses."""

    created_at: datetime
    updated_at: datetime
