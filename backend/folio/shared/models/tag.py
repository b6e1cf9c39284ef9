"""
Tag Entity Model and Link Tables

Tags are created implicitly the first time a name is used on a project or
blog post, and are never deleted by content operations (orphans persist).

Link tables (composite primary keys, cascade on both sides):

    projects ──< project_tags >── tags ──< blog_tags >── blog_posts

SAMPLE RECORDS:
┌──────────────────────────────────────────────────────────────────────────────┐
│ tags          │ id=3  name="Web Dev"  slug="web-dev"                         │
│ project_tags  │ project_id=12  tag_id=3                                      │
│ blog_tags     │ blog_id=5      tag_id=3                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base


# Length of tags.name and tags.slug
TAG_NAME_MAX_LENGTH = 100


class Tag(Base):
    """Globally unique tag name with its slug."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(TAG_NAME_MAX_LENGTH), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(TAG_NAME_MAX_LENGTH), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name={self.name})>"


class ProjectTag(Base):
    """Junction row linking a project to a tag."""

    __tablename__ = "project_tags"

    project_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )


class BlogTag(Base):
    """Junction row linking a blog post to a tag."""

    __tablename__ = "blog_tags"

    blog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
