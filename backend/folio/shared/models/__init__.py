"""
Folio SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── user_settings (UserSettings, 0..1)
       ├── projects      (Project[], created_by)
       └── blog_posts    (BlogPost[], author_id)

    Category ──< Project, BlogPost          (nullable FK, SET NULL on delete)

    Tag ──< ProjectTag >── Project
    Tag ──< BlogTag    >── BlogPost

    BlogPost ──< RelatedContent >── Project | BlogPost

    ContactMessage                           (standalone)

Usage:
======
    from folio.shared.models import Project, Tag, ProjectTag
"""

from folio.shared.models.base import Base, TimestampMixin
from folio.shared.models.enums import UserRole, PostStatus, Theme, MessageStatus
from folio.shared.models.user import User
from folio.shared.models.category import Category
from folio.shared.models.tag import Tag, ProjectTag, BlogTag
from folio.shared.models.project import Project
from folio.shared.models.blog_post import BlogPost, RelatedContent
from folio.shared.models.user_settings import UserSettings
from folio.shared.models.contact_message import ContactMessage

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    # Enums
    "UserRole",
    "PostStatus",
    "Theme",
    "MessageStatus",
    # Models
    "User",
    "Category",
    "Tag",
    "ProjectTag",
    "BlogTag",
    "Project",
    "BlogPost",
    "RelatedContent",
    "UserSettings",
    "ContactMessage",
]
