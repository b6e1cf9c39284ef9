"""
ContactMessage Repository
"""

from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.repositories.base import BaseRepository
from folio.shared.models.contact_message import ContactMessage


class ContactMessageRepository(BaseRepository[ContactMessage]):
    """Repository for contact form submissions. Write-only for now."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContactMessage, session)
