"""
ContactMessage Entity Model

Messages submitted through the public contact form.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base
from folio.shared.models.enums import MessageStatus, enum_column


class ContactMessage(Base):
    """A contact-form submission."""

    __tablename__ = "contact_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[MessageStatus] = mapped_column(
        enum_column(MessageStatus),
        nullable=False,
        default=MessageStatus.UNREAD,
        server_default=MessageStatus.UNREAD.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ContactMessage(id={self.id}, status={self.status})>"
