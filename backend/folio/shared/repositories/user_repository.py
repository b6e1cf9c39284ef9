"""
User Repository

Database operations specific to the User model.

Common Operations:
==================
- get_by_email()      → Find user by email address (login)
- role_statistics()   → Totals for the admin dashboard
"""

from typing import Optional

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.enums import UserRole
from folio.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """Repository for User database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        SQL Generated:
            SELECT * FROM users WHERE email = 'alice@example.com'
        """
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_users(self) -> list[User]:
        """All users, oldest first."""
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    # ═══════════════════════════════════════════════════════════════════════════
    # STATISTICS
    # ═══════════════════════════════════════════════════════════════════════════

    async def role_statistics(self) -> dict[str, int]:
        """
        Count users overall and per role in one query.

        SQL Generated:
            SELECT COUNT(*),
                   COUNT(CASE WHEN role = 'admin' THEN 1 END),
                   COUNT(CASE WHEN role = 'user' THEN 1 END)
            FROM users
        """
        result = await self.session.execute(
            select(
                func.count(User.id),
                func.count(case((User.role == UserRole.ADMIN, 1))),
                func.count(case((User.role == UserRole.USER, 1))),
            )
        )
        total, admins, users = result.one()
        return {
            "total_users": total or 0,
            "admin_count": admins or 0,
            "user_count": users or 0,
        }
