"""
Tag Service

Keeps a content row's tag links in line with a list of tag names.

One reconciler per junction table:

    TagReconciler.for_projects(db)     → project_tags
    TagReconciler.for_blog_posts(db)   → blog_tags

Tag Policy:
===========
- reconcile()  → insert-only: creates missing tags and missing links
- clear()      → removes every link of one content row
- replace()    → clear() then reconcile(), used by update flows

Tags themselves are never deleted here; a tag whose last link goes away
stays in the table.

Everything runs in the caller's transaction. Errors propagate so the
caller's SAVEPOINT can undo partial linkage.
"""

from typing import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.logging import get_logger
from folio.shared.models.tag import BlogTag, ProjectTag, Tag
from folio.shared.repositories.tag_repository import LinkModel, TagLinkRepository, TagRepository
from folio.shared.utils.slug import slugify


logger = get_logger(__name__)


def normalize_tag_names(names: Iterable[str]) -> list[str]:
    """
    Trim names, drop empty ones and exact duplicates, keep first-seen order.

        normalize_tag_names([" AI ", "", "AI", "Web Dev"]) → ["AI", "Web Dev"]
    """
    seen: dict[str, None] = {}
    for name in names:
        if name is None:
            continue
        cleaned = name.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


class TagReconciler:
    """
    Maintains the links between content rows and tags.

    Attributes:
        session: Database session of the current request
        tags: TagRepository
        links: TagLinkRepository for one junction table
    """

    def __init__(self, session: AsyncSession, link_model: LinkModel, owner_column: str) -> None:
        self.session = session
        self.tags = TagRepository(session)
        self.links = TagLinkRepository(session, link_model, owner_column)

    @classmethod
    def for_projects(cls, session: AsyncSession) -> "TagReconciler":
        return cls(session, ProjectTag, "project_id")

    @classmethod
    def for_blog_posts(cls, session: AsyncSession) -> "TagReconciler":
        return cls(session, BlogTag, "blog_id")

    async def get_or_create(self, name: str) -> Tag:
        """
        Find a tag by exact name, creating it when absent.

        The insert runs in its own SAVEPOINT. If it trips a unique
        constraint (a concurrent request created the same tag, or a case
        variant such as "ai" already owns the slug) the existing row is
        reused: first by name, then by slug.
        """
        tag = await self.tags.get_by_name(name)
        if tag is not None:
            return tag

        slug = slugify(name)
        try:
            async with self.session.begin_nested():
                tag = await self.tags.create(name=name, slug=slug)
            logger.info("Tag created", tag_id=tag.id, slug=slug)
            return tag
        except IntegrityError:
            existing = await self.tags.get_by_name(name) or await self.tags.get_by_slug(slug)
            if existing is None:
                raise
            logger.debug("Reusing existing tag", tag_id=existing.id, requested=name)
            return existing

    async def reconcile(self, content_id: int, names: Iterable[str]) -> list[str]:
        """
        Make sure every given name is linked to the content row.

        Existing links are left alone, including links to tags not in names.

        Args:
            content_id: Project or blog post id
            names: Tag display names

        Returns:
            Names of the tags linked by this call, as stored
        """
        linked = await self.links.tag_ids(content_id)
        applied: dict[int, str] = {}

        for name in normalize_tag_names(names):
            tag = await self.get_or_create(name)
            if tag.id in applied:
                continue
            if tag.id not in linked:
                await self.links.add(content_id, tag.id)
                linked.add(tag.id)
            applied[tag.id] = tag.name

        return list(applied.values())

    async def clear(self, content_id: int) -> int:
        """Remove every tag link of the content row. Returns the count removed."""
        return await self.links.clear(content_id)

    async def replace(self, content_id: int, names: Iterable[str]) -> list[str]:
        """Link exactly the given names: clear() followed by reconcile()."""
        await self.clear(content_id)
        return await self.reconcile(content_id, names)
