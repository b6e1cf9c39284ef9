"""
Contact Service

Stores messages sent through the public contact form.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from folio.shared.core.logging import get_logger
from folio.shared.models.contact_message import ContactMessage
from folio.shared.models.enums import MessageStatus
from folio.shared.repositories.contact_message_repository import ContactMessageRepository
from folio.shared.services.content_rules import require_text


logger = get_logger(__name__)


class ContactService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = ContactMessageRepository(session)

    async def submit(self, name: str, email: str, message: str) -> ContactMessage:
        """
        Save a message as unread.

        Raises:
            ValidationError: name or message blank after trimming
        """
        fields = require_text(name=name, message=message)
        contact = await self.repo.create(
            name=fields["name"],
            email=email.strip(),
            message=fields["message"],
            status=MessageStatus.UNREAD,
        )
        logger.info("Contact message received", message_id=contact.id)
        return contact
