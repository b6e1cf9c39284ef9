"""
Settings Service

Per-user preferences (theme, language, email notifications).

A user has no settings row until the first read or write. Creation is
conflict-aware: if two requests race to create the row, the loser reads
the winner's row instead of failing.
"""

from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.exceptions import DuplicateResourceError, UserNotFoundError
from folio.shared.core.logging import get_logger
from folio.shared.models.enums import Theme
from folio.shared.models.user import User
from folio.shared.models.user_settings import UserSettings
from folio.shared.repositories.user_repository import UserRepository
from folio.shared.repositories.user_settings_repository import UserSettingsRepository


logger = get_logger(__name__)


class SettingsService:
    """Service for user settings and self-service profile edits."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserSettingsRepository(session)
        self.users = UserRepository(session)

    async def get_or_create(self, user_id: int) -> UserSettings:
        """
        Return the user's settings, inserting defaults on first use.

        Raises:
            UserNotFoundError: The user no longer exists
        """
        settings_row = await self.repo.get(user_id)
        if settings_row is not None:
            return settings_row

        if not await self.users.exists(user_id):
            raise UserNotFoundError(user_id)

        try:
            async with self.session.begin_nested():
                settings_row = await self.repo.insert_defaults(user_id)
            logger.info("Default settings created", user_id=user_id)
            return settings_row
        except IntegrityError:
            settings_row = await self.repo.get(user_id)
            if settings_row is None:
                raise
            return settings_row

    async def update_settings(
        self,
        user_id: int,
        theme: Theme,
        language: str,
        email_notifications: bool,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Tuple[UserSettings, User]:
        """
        Store preferences and, when given, a new username/email.

        Both changes share one SAVEPOINT.

        Raises:
            UserNotFoundError: The user no longer exists
            DuplicateResourceError: New username or email taken
        """
        settings_row = await self.get_or_create(user_id)

        try:
            async with self.session.begin_nested():
                user = await self.users.get_for_update(user_id)
                if user is None:
                    raise UserNotFoundError(user_id)

                settings_row.theme = theme
                settings_row.language = language.strip()
                settings_row.email_notifications = email_notifications
                if username is not None and username.strip():
                    user.username = username.strip()
                if email is not None and email.strip():
                    user.email = email.strip()
                await self.session.flush()
        except IntegrityError as e:
            raise DuplicateResourceError("Username or email already in use") from e

        await self.session.refresh(settings_row)
        await self.session.refresh(user)
        logger.info("Settings updated", user_id=user_id)
        return settings_row, user
