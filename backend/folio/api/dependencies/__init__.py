"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), require_admin(), CurrentUser, AdminUser
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: SessionClaims = Depends(require_admin)
    ):

    # Write this:
    async def handler(db: DbSession, user: AdminUser):

Usage:
======
    from folio.api.dependencies import AdminUser, DbSession

    @router.get("/categories")
    async def list_categories(db: DbSession, _admin: AdminUser):
        return await CategoryService(db).list_categories()
"""

from folio.api.dependencies.database import (
    get_db,
    DbSession,
)
from folio.api.dependencies.auth import (
    get_token_issuer,
    get_current_user,
    require_admin,
    CurrentUser,
    AdminUser,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_token_issuer",
    "get_current_user",
    "require_admin",
    "CurrentUser",
    "AdminUser",
]
