"""
Database Dependency

FastAPI dependency for database sessions.

The session comes from the Database stored on app.state by the lifespan.
It is committed when the handler returns and rolled back when it raises.

Usage:
======
    from folio.api.dependencies.database import DbSession

    @router.get("/categories")
    async def list_categories(db: DbSession):
        return await CategoryService(db).list_categories()
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.db import get_db


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
