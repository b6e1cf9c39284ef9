"""
Blog Schemas

Request/response models for blog posts.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from folio.shared.models.enums import PostStatus
from folio.shared.schemas.common import BaseSchema, NameList


class BlogPostWrite(BaseModel):
    """
    Create/update body.

    title and content are required. The slug is always computed from the
    title and cannot be sent.
    """

    title: Optional[str] = Field(default=None, max_length=255)
    content: Optional[str] = None
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None
    keywords: NameList = Field(default_factory=list)
    category_id: Optional[int] = None
    status: PostStatus = PostStatus.DRAFT
    tags: NameList = Field(default_factory=list)
    related_project_ids: list[int] = Field(default_factory=list)
    related_post_ids: list[int] = Field(default_factory=list)


class RelatedProject(BaseModel):
    id: int
    title: str
    image_url: Optional[str] = None


class RelatedPost(BaseModel):
    id: int
    title: str
    slug: str


class BlogPostResponse(BaseSchema):
    """A post with author/category names, tags and related projects."""

    id: int
    title: str
    slug: str
    excerpt: Optional[str] = None
    content: str
    image_url: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: list[str] = Field(default_factory=list)
    author_id: Optional[int] = None
    author: Optional[str] = None
    category_id: Optional[int] = None
    category: Optional[str] = None
    status: PostStatus
    views: int
    tags: list[str] = Field(default_factory=list)
    related_projects: list[RelatedProject] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class BlogPostDetailResponse(BlogPostResponse):
    """Single post view, with links to related posts."""

    related_posts: list[RelatedPost] = Field(default_factory=list)
