"""
Project Repository

Database operations specific to the Project model, including the joined
query used to build listing views.

Common Operations:
==================
- list_with_category()  → Projects newest first, each with its category name
- get_with_category()   → One project with its category name
"""

from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.category import Category
from folio.shared.models.project import Project


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Project, session)

    def _with_category(self) -> Select:
        return select(Project, Category.name.label("category_name")).outerjoin(
            Category, Category.id == Project.category_id
        )

    async def list_with_category(
        self,
        limit: Optional[int] = None,
    ) -> list[tuple[Project, Optional[str]]]:
        """
        Projects with their category names, newest first.

        SQL Generated:
            SELECT projects.*, categories.name AS category_name
            FROM projects LEFT OUTER JOIN categories ON categories.id = projects.category_id
            ORDER BY projects.created_at DESC, projects.id DESC
        """
        query = self._with_category().order_by(Project.created_at.desc(), Project.id.desc())
        if limit is not None:
            query = query.limit(limit)
        result = await self.session.execute(query)
        return [(row.Project, row.category_name) for row in result.all()]

    async def get_with_category(self, project_id: int) -> Optional[tuple[Project, Optional[str]]]:
        """One project with its category name, or None."""
        result = await self.session.execute(
            self._with_category().where(Project.id == project_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return row.Project, row.category_name
