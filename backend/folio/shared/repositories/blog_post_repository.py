"""
BlogPost Repository

Database operations specific to the BlogPost model.

Common Operations:
==================
- get_by_slug()        → Lookup used for slug uniqueness checks
- list_views()         → Posts joined with author username and category name
- get_view_by_slug()   → Same view for a single post
- increment_views()    → Atomic views = views + 1
"""

from typing import NamedTuple, Optional

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.blog_post import BlogPost
from folio.shared.models.category import Category
from folio.shared.models.enums import PostStatus
from folio.shared.models.user import User


class BlogPostRow(NamedTuple):
    """A post with the names joined in for display."""

    post: BlogPost
    author: Optional[str]
    category: Optional[str]


class BlogPostRepository(BaseRepository[BlogPost]):
    """Repository for BlogPost database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(BlogPost, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        """
        SQL Generated:
            SELECT * FROM blog_posts WHERE slug = 'hello-world'
        """
        result = await self.session.execute(select(BlogPost).where(BlogPost.slug == slug))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # READ VIEWS
    # ═══════════════════════════════════════════════════════════════════════════

    def _view_query(self) -> Select:
        return (
            select(
                BlogPost,
                User.username.label("author"),
                Category.name.label("category"),
            )
            .outerjoin(User, User.id == BlogPost.author_id)
            .outerjoin(Category, Category.id == BlogPost.category_id)
        )

    async def list_views(self, status: Optional[PostStatus] = None) -> list[BlogPostRow]:
        """
        Posts newest first, optionally restricted to one status.

        SQL Generated:
            SELECT blog_posts.*, users.username AS author, categories.name AS category
            FROM blog_posts
            LEFT OUTER JOIN users ON users.id = blog_posts.author_id
            LEFT OUTER JOIN categories ON categories.id = blog_posts.category_id
            WHERE blog_posts.status = 'published'
            ORDER BY blog_posts.created_at DESC
        """
        query = self._view_query().order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
        if status is not None:
            query = query.where(BlogPost.status == status)
        result = await self.session.execute(query)
        return [BlogPostRow(row.BlogPost, row.author, row.category) for row in result.all()]

    async def get_view_by_slug(
        self,
        slug: str,
        status: Optional[PostStatus] = None,
    ) -> Optional[BlogPostRow]:
        """One post view by slug, or None."""
        query = self._view_query().where(BlogPost.slug == slug)
        if status is not None:
            query = query.where(BlogPost.status == status)
        row = (await self.session.execute(query)).one_or_none()
        if row is None:
            return None
        return BlogPostRow(row.BlogPost, row.author, row.category)

    async def get_view(self, post_id: int) -> Optional[BlogPostRow]:
        """One post view by id, or None."""
        row = (await self.session.execute(self._view_query().where(BlogPost.id == post_id))).one_or_none()
        if row is None:
            return None
        return BlogPostRow(row.BlogPost, row.author, row.category)

    # ═══════════════════════════════════════════════════════════════════════════
    # COUNTERS
    # ═══════════════════════════════════════════════════════════════════════════

    async def increment_views(self, post_id: int) -> int:
        """
        Add one to a post's view counter in a single statement.

        Returns:
            The new counter value

        SQL Generated:
            UPDATE blog_posts SET views = views + 1 WHERE id = 5 RETURNING views
        """
        result = await self.session.execute(
            update(BlogPost)
            .where(BlogPost.id == post_id)
            .values(views=BlogPost.views + 1)
            .returning(BlogPost.views)
            .execution_options(synchronize_session=False)
        )
        return result.scalar_one()
