"""
Tag Repositories

TagRepository:      the tags table itself
TagLinkRepository:  one junction table (project_tags or blog_tags)

Usage:
======
    tags = TagRepository(db)
    project_links = TagLinkRepository(db, ProjectTag, "project_id")

    tag = await tags.get_by_name("Web Dev")
    await project_links.add(project.id, tag.id)
    names = await project_links.names_by_owner([project.id])   # {12: ["Web Dev"]}
"""

from collections import defaultdict
from typing import Iterable, Optional, Type, Union

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.tag import BlogTag, ProjectTag, Tag


LinkModel = Union[Type[ProjectTag], Type[BlogTag]]


class TagRepository(BaseRepository[Tag]):
    """Repository for Tag rows."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Tag, session)

    async def get_by_name(self, name: str) -> Optional[Tag]:
        result = await self.session.execute(select(Tag).where(Tag.name == name))
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Tag]:
        result = await self.session.execute(select(Tag).where(Tag.slug == slug))
        return result.scalar_one_or_none()


class TagLinkRepository:
    """
    Repository for one tag junction table.

    Attributes:
        link_model: ProjectTag or BlogTag
        owner_column: Name of the column pointing at the content row
    """

    def __init__(self, session: AsyncSession, link_model: LinkModel, owner_column: str) -> None:
        self.session = session
        self.link_model = link_model
        self.owner_column = owner_column

    @property
    def _owner(self):
        return getattr(self.link_model, self.owner_column)

    async def tag_ids(self, owner_id: int) -> set[int]:
        """
        Ids of tags currently linked to a content row.

        SQL Generated:
            SELECT tag_id FROM project_tags WHERE project_id = 12
        """
        result = await self.session.execute(
            select(self.link_model.tag_id).where(self._owner == owner_id)
        )
        return set(result.scalars().all())

    async def add(self, owner_id: int, tag_id: int) -> None:
        """Insert one link row."""
        await self.session.execute(
            insert(self.link_model).values(**{self.owner_column: owner_id, "tag_id": tag_id})
        )

    async def clear(self, owner_id: int) -> int:
        """
        Delete every link of a content row.

        Returns:
            Number of links removed
        """
        result = await self.session.execute(
            delete(self.link_model).where(self._owner == owner_id)
        )
        return result.rowcount or 0

    async def names_by_owner(self, owner_ids: Iterable[int]) -> dict[int, list[str]]:
        """
        Tag names per content row for a batch of rows.

        Order within each list is not guaranteed.

        SQL Generated:
            SELECT project_tags.project_id, tags.name
            FROM project_tags JOIN tags ON tags.id = project_tags.tag_id
            WHERE project_tags.project_id IN (12, 13)
        """
        ids = list(owner_ids)
        if not ids:
            return {}

        result = await self.session.execute(
            select(self._owner, Tag.name)
            .join(Tag, Tag.id == self.link_model.tag_id)
            .where(self._owner.in_(ids))
        )
        names: dict[int, list[str]] = defaultdict(list)
        for owner_id, name in result.all():
            names[owner_id].append(name)
        return dict(names)
