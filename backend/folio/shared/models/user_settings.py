"""
UserSettings Entity Model

One row per user at most (user_id is both primary key and foreign key).
Created lazily with defaults the first time settings are read.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, true
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base, TimestampMixin
from folio.shared.models.enums import Theme, enum_column


class UserSettings(Base, TimestampMixin):
    """Per-user UI and notification preferences."""

    __tablename__ = "user_settings"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    theme: Mapped[Theme] = mapped_column(
        enum_column(Theme),
        nullable=False,
        default=Theme.LIGHT,
        server_default=Theme.LIGHT.value,
    )
    language: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default="en",
        server_default="en",
    )
    email_notifications: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    def __repr__(self) -> str:
        return f"<UserSettings(user_id={self.user_id}, theme={self.theme})>"
