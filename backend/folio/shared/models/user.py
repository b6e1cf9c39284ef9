"""
User Entity Model

Represents a registered account. Admins manage the site's content.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 1                                                         │
│ username         │ "alice"                                                   │
│ email            │ "alice@example.com"                                       │
│ password         │ "$2b$10$..."                                              │
│ role             │ "user"                                                    │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.shared.models.base import Base, TimestampMixin
from folio.shared.models.enums import UserRole, enum_column


class User(Base, TimestampMixin):
    """
    User model.

    Attributes:
        id: Surrogate integer key
        username: Display/login name (unique)
        email: Login email (unique)
        password: bcrypt hash, never the plaintext
        role: UserRole, changed only by an admin
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    # bcrypt hash
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[UserRole] = mapped_column(
        enum_column(UserRole),
        nullable=False,
        default=UserRole.USER,
        server_default=UserRole.USER.value,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
