"""
Project & Category Schemas

Request/response models for the project catalog and its categories.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from folio.shared.schemas.common import BaseSchema, NameList, TimestampMixin


# ═══════════════════════════════════════════════════════════════════════════════
# CATEGORIES
# ═══════════════════════════════════════════════════════════════════════════════


class CategoryWrite(BaseModel):
    """Create/update body. The slug is derived from name."""

    name: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None


class CategoryResponse(BaseSchema, TimestampMixin):
    id: int
    name: str
    slug: str
    description: Optional[str] = None


# ═══════════════════════════════════════════════════════════════════════════════
# PROJECTS
# ═══════════════════════════════════════════════════════════════════════════════


class ProjectWrite(BaseModel):
    """
    Create/update body.

    title and description are required; they are checked after trimming
    so that blank strings are rejected with the field name.
    """

    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    tags: NameList = Field(default_factory=list)


class ProjectResponse(BaseSchema):
    """A project with its category name and tag names."""

    id: int
    title: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    category_name: Optional[str] = None
    image_url: Optional[str] = None
    created_by: Optional[int] = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
