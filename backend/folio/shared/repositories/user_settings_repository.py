"""
UserSettings Repository

Settings rows are keyed by user_id rather than a surrogate id.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.models.user_settings import UserSettings


class UserSettingsRepository:
    """Repository for UserSettings rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, user_id: int) -> Optional[UserSettings]:
        """
        SQL Generated:
            SELECT * FROM user_settings WHERE user_id = 1
        """
        result = await self.session.execute(
            select(UserSettings)
            .where(UserSettings.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def insert_defaults(self, user_id: int) -> UserSettings:
        """
        Insert a row with default values.

        Raises IntegrityError if the user already has one; callers wrap this
        in a SAVEPOINT and fall back to get().
        """
        row = UserSettings(user_id=user_id)
        self.session.add(row)
        await self.session.flush()
        await self.session.refresh(row)
        return row
