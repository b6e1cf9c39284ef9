"""
Blog Service

Business logic for blog posts: publishing workflow, slugs, tags, related
content and view counting.

Write Protocol:
===============
    1. Validate title/content, category_id and related ids
    2. Strict slug from title; another post owning it → ConflictError
    3. SAVEPOINT
    4.   INSERT, or SELECT ... FOR UPDATE + UPDATE
    5.   Updates: clear tag links
    6.   Reconcile tags, replace related_content rows
    7. RELEASE SAVEPOINT             (ROLLBACK TO on any error)

Slugs:
======
    "Hello, World!"  → "hello-world"
    Two titles with the same slug cannot coexist; no suffix is appended.

Usage:
======
    from folio.shared.services.blog_service import BlogService

    service = BlogService(db)
    post = await service.get_published_post("hello-world")   # views += 1
"""

from typing import Any, Iterable, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import BlogPostNotFoundError, ConflictError, ValidationError
from folio.shared.core.logging import get_logger
from folio.shared.models.blog_post import BlogPost
from folio.shared.models.enums import PostStatus
from folio.shared.repositories.base import is_missing_relation_error, is_unique_violation
from folio.shared.repositories.blog_post_repository import BlogPostRepository, BlogPostRow
from folio.shared.repositories.project_repository import ProjectRepository
from folio.shared.repositories.related_content_repository import RelatedContentRepository
from folio.shared.services.content_rules import check_category, check_tags, optional_text, require_text
from folio.shared.services.tag_service import TagReconciler
from folio.shared.utils.slug import slugify


logger = get_logger(__name__)


def blog_post_view(
    row: BlogPostRow,
    tags: list[str],
    related_projects: list[dict[str, Any]],
) -> dict[str, Any]:
    """Flatten a post and its joined names into the listing shape."""
    post = row.post
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.slug,
        "excerpt": post.excerpt,
        "content": post.content,
        "image_url": post.image_url,
        "meta_title": post.meta_title,
        "meta_description": post.meta_description,
        "keywords": list(post.keywords or []),
        "author_id": post.author_id,
        "author": row.author,
        "category_id": post.category_id,
        "category": row.category,
        "status": post.status,
        "views": post.views,
        "tags": tags,
        "related_projects": related_projects,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }


class BlogService:
    """
    Service for blog post reads and writes.

    Attributes:
        session: Database session
        repo: BlogPostRepository instance
        related: RelatedContentRepository instance
        tags: TagReconciler for blog_tags
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = BlogPostRepository(session)
        self.related = RelatedContentRepository(session)
        self.tags = TagReconciler.for_blog_posts(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _views(self, rows: list[BlogPostRow]) -> list[dict[str, Any]]:
        ids = [row.post.id for row in rows]
        tags = await self.tags.links.names_by_owner(ids)
        projects = await self.related.related_projects_by_blog(ids)
        return [
            blog_post_view(row, tags.get(row.post.id, []), projects.get(row.post.id, []))
            for row in rows
        ]

    async def list_posts(self, published_only: bool = True) -> list[dict[str, Any]]:
        """
        Posts newest first. The public listing passes published_only=True,
        the admin listing False.

        A missing table yields an empty list instead of an error.
        """
        status = PostStatus.PUBLISHED if published_only else None
        try:
            rows = await self.repo.list_views(status=status)
            return await self._views(rows)
        except DBAPIError as e:
            if not is_missing_relation_error(e):
                raise
            logger.warning("Blog tables missing, returning empty list", error=str(e.orig))
            await self.session.rollback()
            return []

    async def get_post(self, post_id: int) -> dict[str, Any]:
        """
        Any post by id, drafts included. Does not count as a view.

        Raises:
            BlogPostNotFoundError: No post with this id
        """
        row = await self.repo.get_view(post_id)
        if row is None:
            raise BlogPostNotFoundError(post_id)
        view = (await self._views([row]))[0]
        related_posts = await self.related.related_posts_by_blog([post_id])
        view["related_posts"] = related_posts.get(post_id, [])
        return view

    async def get_published_post(self, slug: str) -> dict[str, Any]:
        """
        A published post by slug, counting one view.

        Every call increments the counter; the returned views value is the
        incremented one.

        Raises:
            BlogPostNotFoundError: No published post with this slug
        """
        row = await self.repo.get_view_by_slug(slug, status=PostStatus.PUBLISHED)
        if row is None:
            raise BlogPostNotFoundError(slug)

        view = (await self._views([row]))[0]
        related_posts = await self.related.related_posts_by_blog([row.post.id], status=PostStatus.PUBLISHED)
        view["related_posts"] = related_posts.get(row.post.id, [])
        view["views"] = await self.repo.increment_views(row.post.id)
        return view

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def _check_slug(self, title: str, post_id: Optional[int] = None) -> str:
        slug = slugify(title, strict=True)
        if not slug:
            raise ValidationError(
                "Title must contain at least one letter or digit",
                details={"field": "title"},
            )
        owner = await self.repo.get_by_slug(slug)
        if owner is not None and owner.id != post_id:
            raise ConflictError("A blog post with this title already exists", details={"slug": slug})
        return slug

    def _write_conflict(self, exc: IntegrityError, slug: str) -> ConflictError:
        """A concurrent insert won the slug, or another constraint failed."""
        if is_unique_violation(exc, "blog_posts", "slug"):
            return ConflictError("A blog post with this title already exists", details={"slug": slug})
        logger.warning("Blog post write conflict", slug=slug, error=str(exc.orig))
        return ConflictError("Blog post conflicts with existing data")

    async def _check_related(
        self,
        project_ids: Iterable[int],
        post_ids: Iterable[int],
        post_id: Optional[int] = None,
    ) -> tuple[list[int], list[int]]:
        project_ids = list(dict.fromkeys(project_ids))
        post_ids = list(dict.fromkeys(post_ids))

        projects = ProjectRepository(self.session)
        for project_id in project_ids:
            if not await projects.exists(project_id):
                raise ValidationError(
                    f"Related project '{project_id}' does not exist",
                    details={"field": "related_project_ids"},
                )
        for related_id in post_ids:
            if related_id == post_id or not await self.repo.exists(related_id):
                raise ValidationError(
                    f"Related post '{related_id}' is not valid",
                    details={"field": "related_post_ids"},
                )
        return project_ids, post_ids

    async def create_post(
        self,
        title: Optional[str],
        content: Optional[str],
        author_id: Optional[int] = None,
        excerpt: Optional[str] = None,
        image_url: Optional[str] = None,
        meta_title: Optional[str] = None,
        meta_description: Optional[str] = None,
        keywords: Iterable[str] = (),
        category_id: Optional[int] = None,
        status: PostStatus = PostStatus.DRAFT,
        tags: Iterable[str] = (),
        related_project_ids: Iterable[int] = (),
        related_post_ids: Iterable[int] = (),
    ) -> dict[str, Any]:
        """
        Create a post with its tags and related content.

        Raises:
            ValidationError: Empty title/content, empty slug, unknown
                category or related ids, over-long tag name
            ConflictError: Another post already has this title's slug
        """
        fields = require_text(title=title, content=content)
        category_id = await check_category(self.session, category_id)
        tag_names = check_tags(tags)
        project_ids, post_ids = await self._check_related(related_project_ids, related_post_ids)
        slug = await self._check_slug(fields["title"])

        try:
            async with self.session.begin_nested():
                post = await self.repo.create(
                    title=fields["title"],
                    slug=slug,
                    content=fields["content"],
                    excerpt=optional_text(excerpt),
                    image_url=optional_text(image_url),
                    meta_title=optional_text(meta_title),
                    meta_description=optional_text(meta_description),
                    keywords=[k.strip() for k in keywords if k and k.strip()],
                    author_id=author_id,
                    category_id=category_id,
                    status=status,
                )
                await self.tags.reconcile(post.id, tag_names)
                await self.related.replace(post.id, project_ids, post_ids)
        except IntegrityError as e:
            raise self._write_conflict(e, slug) from e

        logger.info("Blog post created", post_id=post.id, slug=slug, status=status.value)
        return await self.get_post(post.id)

    async def update_post(
        self,
        post_id: int,
        title: Optional[str],
        content: Optional[str],
        excerpt: Optional[str] = None,
        image_url: Optional[str] = None,
        meta_title: Optional[str] = None,
        meta_description: Optional[str] = None,
        keywords: Iterable[str] = (),
        category_id: Optional[int] = None,
        status: PostStatus = PostStatus.DRAFT,
        tags: Iterable[str] = (),
        related_project_ids: Iterable[int] = (),
        related_post_ids: Iterable[int] = (),
    ) -> dict[str, Any]:
        """
        Replace a post's fields, tags and related content.

        The slug follows the title. views and author_id are never touched.

        Raises:
            ValidationError, ConflictError: see create_post()
            BlogPostNotFoundError: No post with this id
        """
        fields = require_text(title=title, content=content)
        category_id = await check_category(self.session, category_id)
        tag_names = check_tags(tags)
        if not await self.repo.exists(post_id):
            raise BlogPostNotFoundError(post_id)
        project_ids, post_ids = await self._check_related(related_project_ids, related_post_ids, post_id)
        slug = await self._check_slug(fields["title"], post_id)

        try:
            async with self.session.begin_nested():
                post: Optional[BlogPost] = await self.repo.get_for_update(post_id)
                if post is None:
                    raise BlogPostNotFoundError(post_id)

                post.title = fields["title"]
                post.slug = slug
                post.content = fields["content"]
                post.excerpt = optional_text(excerpt)
                post.image_url = optional_text(image_url)
                post.meta_title = optional_text(meta_title)
                post.meta_description = optional_text(meta_description)
                post.keywords = [k.strip() for k in keywords if k and k.strip()]
                post.category_id = category_id
                post.status = status
                await self.session.flush()

                await self.tags.replace(post.id, tag_names)
                await self.related.replace(post.id, project_ids, post_ids)
        except IntegrityError as e:
            raise self._write_conflict(e, slug) from e

        logger.info("Blog post updated", post_id=post_id, slug=slug, status=status.value)
        return await self.get_post(post_id)

    async def delete_post(self, post_id: int) -> None:
        """
        Delete a post. Tag links and related content rows go with it.

        Raises:
            BlogPostNotFoundError: No post with this id
        """
        if not await self.repo.delete(post_id):
            raise BlogPostNotFoundError(post_id)
        logger.info("Blog post deleted", post_id=post_id)
