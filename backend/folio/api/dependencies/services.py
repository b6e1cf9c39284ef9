"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from folio.api.dependencies.services import get_project_service

    @router.get("/projects")
    async def list_projects(service: ProjectService = Depends(get_project_service)):
        return await service.list_projects()
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from folio.api.dependencies.auth import get_token_issuer
from folio.shared.db import get_db
from folio.shared.services import (
    AuthService,
    BlogService,
    CategoryService,
    ContactService,
    ProjectService,
    SettingsService,
    UploadService,
    UserService,
)
from folio.shared.utils.security import TokenIssuer


async def get_auth_service(
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session
    and the application's token issuer.
    """
    return AuthService(db, issuer)


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


async def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


async def get_project_service(db: AsyncSession = Depends(get_db)) -> ProjectService:
    return ProjectService(db)


async def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(db)


async def get_settings_service(db: AsyncSession = Depends(get_db)) -> SettingsService:
    return SettingsService(db)


async def get_contact_service(db: AsyncSession = Depends(get_db)) -> ContactService:
    return ContactService(db)


def get_upload_service(request: Request) -> UploadService:
    """UploadService configured from the application's settings."""
    return UploadService.from_settings(request.app.state.settings)
