"""
Enums used across the application.

Stored as their lower-case string values (see enum_column()).
"""

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SQLEnum


class UserRole(str, Enum):
    """Closed set of roles. Only admins pass the admin gate."""

    USER = "user"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Publication state of a blog post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class Theme(str, Enum):
    """UI theme preference."""

    LIGHT = "light"
    DARK = "dark"


class MessageStatus(str, Enum):
    """Triage state of a contact message."""

    UNREAD = "unread"
    READ = "read"
    ARCHIVED = "archived"


def enum_column(enum_cls: Type[Enum]) -> SQLEnum:
    """
    Column type persisting an enum by value in a VARCHAR.

    Non-native so the schema stays portable and adding a member needs no
    ALTER TYPE.
    """
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [m.value for m in members],
        native_enum=False,
        length=20,
        validate_strings=True,
    )
