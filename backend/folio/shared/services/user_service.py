"""
User Service

Admin-side user management and dashboard statistics.

Usage:
======
    from folio.shared.services.user_service import UserService

    service = UserService(db)
    stats = await service.dashboard_statistics()
    # {"total_users": 3, "admin_count": 1, "user_count": 2}
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import DuplicateResourceError, UserNotFoundError
from folio.shared.core.logging import get_logger
from folio.shared.models.enums import UserRole
from folio.shared.models.user import User
from folio.shared.repositories.user_repository import UserRepository
from folio.shared.services.auth_service import AuthService, hash_password


logger = get_logger(__name__)


class UserService:
    """
    Service for user administration.

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def list_users(self) -> list[User]:
        return await self.repo.list_users()

    async def get_user(self, user_id: int) -> User:
        user = await self.repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def dashboard_statistics(self) -> dict[str, int]:
        return await self.repo.role_statistics()

    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """
        Create an account on behalf of an admin.

        Raises:
            DuplicateResourceError: Username or email taken
        """
        return await AuthService(self.session).register_user(username, email, password, role=role)

    async def update_user(
        self,
        user_id: int,
        username: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[UserRole] = None,
    ) -> User:
        """
        Change the given fields of a user; None leaves a field as is.

        Raises:
            UserNotFoundError: No user with this id
            DuplicateResourceError: New username or email taken
        """
        password_hash = await hash_password(password) if password else None

        try:
            async with self.session.begin_nested():
                user = await self.repo.get_for_update(user_id)
                if user is None:
                    raise UserNotFoundError(user_id)

                if username is not None:
                    user.username = username.strip()
                if email is not None:
                    user.email = email.strip()
                if password_hash is not None:
                    user.password = password_hash
                if role is not None:
                    user.role = role
                await self.session.flush()
        except IntegrityError as e:
            raise DuplicateResourceError("Username or email already in use") from e

        await self.session.refresh(user)
        logger.info("User updated", user_id=user_id, password_changed=password_hash is not None)
        return user

    async def set_role(self, user_id: int, role: UserRole) -> User:
        user = await self.update_user(user_id, role=role)
        logger.info("User role changed", user_id=user_id, role=role.value)
        return user

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user. Their settings go with them; their projects and
        posts stay, with no author.

        Raises:
            UserNotFoundError: No user with this id
        """
        if not await self.repo.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info("User deleted", user_id=user_id)
