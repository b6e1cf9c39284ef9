"""
Base Repository

Generic base repository with the CRUD operations every entity shares.
Entity-specific repositories inherit from it and add their own queries.

What This Provides:
===================
- get(id)          → Fetch single record by primary key
- get_for_update() → Same, but locks the row until the transaction ends
- exists()         → Check if a record exists
- create()         → Insert a record
- delete()         → Hard delete a record

Generic Type Pattern:
=====================
    class UserRepository(BaseRepository[User]):
        ...

    user = await UserRepository(db).get(1)  # typed as Optional[User]

flush() vs commit():
====================
Repository methods only flush(). The request-level commit happens in
get_db(), and services group multi-step writes in SAVEPOINTs.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete as sql_delete
from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from folio.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)


def is_missing_relation_error(exc: DBAPIError) -> bool:
    """True if a database error means a table/relation is absent."""
    message = str(exc.orig).lower()
    driver_error = type(exc.orig).__name__.lower()
    return (
        "no such table" in message  # SQLite
        or ("relation" in message and "does not exist" in message)  # PostgreSQL
        or "undefinedtable" in driver_error  # asyncpg
    )


def is_unique_violation(exc: DBAPIError, table: str, column: str) -> bool:
    """
    True if a database error is the unique constraint on table.column.

    SQLite: "UNIQUE constraint failed: blog_posts.slug"
    PostgreSQL: duplicate key value violates unique constraint "ix_blog_posts_slug"
    """
    message = str(exc.orig).lower()
    return (
        ("unique" in message or "duplicate key" in message)
        and table in message
        and column in message
    )


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        SQL Generated:
            SELECT * FROM projects WHERE id = 12
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_for_update(self, record_id: int) -> Optional[ModelType]:
        """
        Get a record and lock its row for the rest of the transaction.

        Concurrent writers to the same id queue behind the lock. SQLite has
        no row locks and ignores the clause.

        SQL Generated:
            SELECT * FROM projects WHERE id = 12 FOR UPDATE
        """
        result = await self.session.execute(
            select(self.model)
            .where(self.model.id == record_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def exists(self, record_id: int) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes to obtain the generated id, then refreshes so server
        defaults (timestamps, views, role) are populated.

        SQL Generated:
            INSERT INTO categories (name, slug, description) VALUES (...)
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: int) -> bool:
        """
        Hard delete a record by id.

        Dependent rows are removed or detached by the foreign keys'
        ON DELETE rules.

        Returns:
            True if deleted, False if not found

        SQL Generated:
            DELETE FROM projects WHERE id = 12
        """
        result = await self.session.execute(
            sql_delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session="fetch")
        )
        return (result.rowcount or 0) > 0
