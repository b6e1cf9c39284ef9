"""
BlogPost and RelatedContent Entity Models

Model Hierarchy:
================
    BlogPost
       ├── blog_tags (BlogTag[])            - tag links, see tag.py
       └── related_content (RelatedContent[])
              ├── project_id       → Project   ┐ exactly one
              └── related_blog_id  → BlogPost  ┘ of the two

SAMPLE BLOG_POST RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 5                                                         │
│ title            │ "Hello World!"                                            │
│ slug             │ "hello-world"                                             │
│ status           │ "published"                                               │
│ keywords         │ ["python", "fastapi"]                                     │
│ views            │ 42                                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base, TimestampMixin
from folio.shared.models.enums import PostStatus, enum_column


class BlogPost(Base, TimestampMixin):
    """
    Blog post.

    The slug is derived from the title and unique. views is only ever
    changed by the public detail read, never by create/update.
    """

    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # SEO
    meta_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    keywords: Mapped[list[str]] = mapped_column(nullable=False, default=list)

    author_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    status: Mapped[PostStatus] = mapped_column(
        enum_column(PostStatus),
        nullable=False,
        default=PostStatus.DRAFT,
        server_default=PostStatus.DRAFT.value,
        index=True,
    )

    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, slug={self.slug}, status={self.status})>"


class RelatedContent(Base):
    """
    Link from a blog post to a project or to another blog post.

    The CHECK constraint guarantees exactly one target column is set.
    """

    __tablename__ = "related_content"
    __table_args__ = (
        CheckConstraint(
            "(project_id IS NULL) <> (related_blog_id IS NULL)",
            name="ck_related_content_single_target",
        ),
        UniqueConstraint("blog_id", "project_id", name="uq_related_content_project"),
        UniqueConstraint("blog_id", "related_blog_id", name="uq_related_content_blog"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    blog_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    project_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=True,
    )
    related_blog_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=True,
    )
    relevance_score: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)

    def __repr__(self) -> str:
        target = f"project={self.project_id}" if self.project_id else f"blog={self.related_blog_id}"
        return f"<RelatedContent(blog_id={self.blog_id}, {target})>"
