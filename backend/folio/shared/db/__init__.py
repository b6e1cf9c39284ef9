"""
Database Module

Database connectivity and session management for Folio.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  passed to Services → Repositories
        ▼
    PostgreSQL

Components:
===========
- session.py: Database (engine + session factory), lifecycle functions, get_db

Usage in FastAPI:
=================
    from fastapi import Depends
    from folio.shared.db import get_db
    from folio.shared.repositories import UserRepository

    @router.get("/users/{user_id}")
    async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from folio.shared.db.session import (
    Database,
    get_db,
    init_db,
    close_db,
)

__all__ = [
    "Database",
    "get_db",
    "init_db",
    "close_db",
]
