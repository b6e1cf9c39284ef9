"""
Project Service

Business logic for the project catalog.

Write Protocol:
===============
    1. Validate title/description and category_id    (nothing written on failure)
    2. SAVEPOINT
    3.   INSERT, or SELECT ... FOR UPDATE + UPDATE
    4.   Updates: clear tag links
    5.   Reconcile tags
    6. RELEASE SAVEPOINT                               (ROLLBACK TO on any error)

The request transaction commits in get_db() once the handler returns.

Usage:
======
    from folio.shared.services.project_service import ProjectService

    service = ProjectService(db)
    project = await service.create_project(
        title="Demo", description="d", tags=["AI", "Web Dev"], created_by=1,
    )
"""

from typing import Any, Iterable, Optional

from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import ConflictError, ProjectNotFoundError
from folio.shared.core.logging import get_logger
from folio.shared.models.project import Project
from folio.shared.repositories.base import is_missing_relation_error
from folio.shared.repositories.project_repository import ProjectRepository
from folio.shared.services.content_rules import check_category, check_tags, optional_text, require_text
from folio.shared.services.tag_service import TagReconciler


logger = get_logger(__name__)


def project_view(project: Project, category_name: Optional[str], tags: list[str]) -> dict[str, Any]:
    """Flatten a project and its joined names into the listing shape."""
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "category_id": project.category_id,
        "category_name": category_name,
        "image_url": project.image_url,
        "created_by": project.created_by,
        "tags": tags,
        "created_at": project.created_at,
        "updated_at": project.updated_at,
    }


class ProjectService:
    """
    Service for project reads and writes.

    Attributes:
        session: Database session
        repo: ProjectRepository instance
        tags: TagReconciler for project_tags
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ProjectRepository(session)
        self.tags = TagReconciler.for_projects(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def list_projects(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        """
        Projects newest first with category name and tag names.

        A missing table (fresh database, migrations not run) yields an
        empty list instead of an error.
        """
        try:
            rows = await self.repo.list_with_category(limit=limit)
            tags = await self.tags.links.names_by_owner(project.id for project, _ in rows)
        except DBAPIError as e:
            if not is_missing_relation_error(e):
                raise
            logger.warning("Project tables missing, returning empty list", error=str(e.orig))
            await self.session.rollback()
            return []

        return [project_view(project, category, tags.get(project.id, [])) for project, category in rows]

    async def get_project(self, project_id: int) -> dict[str, Any]:
        """
        Raises:
            ProjectNotFoundError: No project with this id
        """
        row = await self.repo.get_with_category(project_id)
        if row is None:
            raise ProjectNotFoundError(project_id)
        project, category = row
        tags = await self.tags.links.names_by_owner([project.id])
        return project_view(project, category, tags.get(project.id, []))

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITES
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_project(
        self,
        title: Optional[str],
        description: Optional[str],
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        tags: Iterable[str] = (),
        created_by: Optional[int] = None,
    ) -> dict[str, Any]:
        """
        Create a project and link its tags.

        Raises:
            ValidationError: Empty title/description, unknown category or
                over-long tag name
            ConflictError: A constraint rejected the write
        """
        fields = require_text(title=title, description=description)
        category_id = await check_category(self.session, category_id)
        tag_names = check_tags(tags)

        try:
            async with self.session.begin_nested():
                project = await self.repo.create(
                    title=fields["title"],
                    description=fields["description"],
                    category_id=category_id,
                    image_url=optional_text(image_url),
                    created_by=created_by,
                )
                await self.tags.reconcile(project.id, tag_names)
        except IntegrityError as e:
            raise ConflictError("Project conflicts with existing data") from e

        logger.info("Project created", project_id=project.id)
        return await self.get_project(project.id)

    async def update_project(
        self,
        project_id: int,
        title: Optional[str],
        description: Optional[str],
        category_id: Optional[int] = None,
        image_url: Optional[str] = None,
        tags: Iterable[str] = (),
    ) -> dict[str, Any]:
        """
        Replace a project's fields and tags.

        Raises:
            ValidationError: Empty title/description, unknown category or
                over-long tag name
            ProjectNotFoundError: No project with this id
        """
        fields = require_text(title=title, description=description)
        category_id = await check_category(self.session, category_id)
        tag_names = check_tags(tags)

        try:
            async with self.session.begin_nested():
                project = await self.repo.get_for_update(project_id)
                if project is None:
                    raise ProjectNotFoundError(project_id)

                project.title = fields["title"]
                project.description = fields["description"]
                project.category_id = category_id
                project.image_url = optional_text(image_url)
                await self.session.flush()

                await self.tags.replace(project.id, tag_names)
        except IntegrityError as e:
            raise ConflictError("Project conflicts with existing data") from e

        logger.info("Project updated", project_id=project_id)
        return await self.get_project(project_id)

    async def delete_project(self, project_id: int) -> None:
        """
        Delete a project. Its tag links go with it.

        Raises:
            ProjectNotFoundError: No project with this id
        """
        if not await self.repo.delete(project_id):
            raise ProjectNotFoundError(project_id)
        logger.info("Project deleted", project_id=project_id)
