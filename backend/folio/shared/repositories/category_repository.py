"""
Category Repository

Database operations for categories.
"""

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.category import Category


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Category, session)

    async def list_by_name(self) -> list[Category]:
        """All categories in alphabetical order."""
        result = await self.session.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def find_clash(
        self,
        name: str,
        slug: str,
        exclude_id: Optional[int] = None,
    ) -> Optional[Category]:
        """
        Find another category already owning this name or slug.

        SQL Generated:
            SELECT * FROM categories
            WHERE (name = 'Web' OR slug = 'web') AND id != 3
        """
        query = select(Category).where(or_(Category.name == name, Category.slug == slug))
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none()
