"""
Category Service

Admin CRUD for categories. The slug is derived from the name on every write.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import CategoryNotFoundError, ConflictError
from folio.shared.core.logging import get_logger
from folio.shared.models.category import Category
from folio.shared.repositories.category_repository import CategoryRepository
from folio.shared.services.content_rules import optional_text, require_text
from folio.shared.utils.slug import slugify


logger = get_logger(__name__)


class CategoryService:
    """Service for category management."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = CategoryRepository(session)

    async def list_categories(self) -> list[Category]:
        return await self.repo.list_by_name()

    async def get_category(self, category_id: int) -> Category:
        category = await self.repo.get(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)
        return category

    async def _check_clash(self, name: str, exclude_id: Optional[int] = None) -> str:
        slug = slugify(name)
        if await self.repo.find_clash(name, slug, exclude_id=exclude_id) is not None:
            raise ConflictError("Category already exists", details={"slug": slug})
        return slug

    async def create_category(self, name: Optional[str], description: Optional[str] = None) -> Category:
        """
        Raises:
            ValidationError: Empty name
            ConflictError: Name or slug already used
        """
        name = require_text(name=name)["name"]
        slug = await self._check_clash(name)

        try:
            async with self.session.begin_nested():
                category = await self.repo.create(
                    name=name,
                    slug=slug,
                    description=optional_text(description),
                )
        except IntegrityError as e:
            raise ConflictError("Category already exists", details={"slug": slug}) from e

        logger.info("Category created", category_id=category.id, slug=slug)
        return category

    async def update_category(
        self,
        category_id: int,
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Category:
        """
        Raises:
            ValidationError: Empty name
            CategoryNotFoundError: No category with this id
            ConflictError: Name or slug used by another category
        """
        name = require_text(name=name)["name"]
        category = await self.get_category(category_id)
        slug = await self._check_clash(name, exclude_id=category_id)

        try:
            async with self.session.begin_nested():
                category.name = name
                category.slug = slug
                category.description = optional_text(description)
                await self.session.flush()
        except IntegrityError as e:
            raise ConflictError("Category already exists", details={"slug": slug}) from e

        await self.session.refresh(category)
        logger.info("Category updated", category_id=category_id)
        return category

    async def delete_category(self, category_id: int) -> None:
        """
        Delete a category. Projects and posts in it become uncategorized.

        Raises:
            CategoryNotFoundError: No category with this id
        """
        if not await self.repo.delete(category_id):
            raise CategoryNotFoundError(category_id)
        logger.info("Category deleted", category_id=category_id)
