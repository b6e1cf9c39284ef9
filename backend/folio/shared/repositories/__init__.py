"""
Repository Pattern Implementations

Repositories encapsulate database queries behind a small async API.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Lookup by email/username, role stats
         ├── CategoryRepository         ← Name/slug clash checks
         ├── TagRepository              ← Tag lookup by name/slug
         ├── ProjectRepository          ← Listing joined with category
         ├── BlogPostRepository         ← Listing joined with author/category, views
         └── ContactMessageRepository

    TagLinkRepository                   ← One junction table (project_tags / blog_tags)
    RelatedContentRepository            ← Blog → project/post links
    UserSettingsRepository              ← Keyed by user_id

Usage Example:
==============
    from folio.shared.repositories import ProjectRepository

    rows = await ProjectRepository(db).list_with_category()
"""

from folio.shared.repositories.base import BaseRepository, is_missing_relation_error, is_unique_violation
from folio.shared.repositories.user_repository import UserRepository
from folio.shared.repositories.category_repository import CategoryRepository
from folio.shared.repositories.tag_repository import TagRepository, TagLinkRepository
from folio.shared.repositories.project_repository import ProjectRepository
from folio.shared.repositories.blog_post_repository import BlogPostRepository, BlogPostRow
from folio.shared.repositories.related_content_repository import RelatedContentRepository
from folio.shared.repositories.user_settings_repository import UserSettingsRepository
from folio.shared.repositories.contact_message_repository import ContactMessageRepository

__all__ = [
    # Base class
    "BaseRepository",
    "is_missing_relation_error",
    "is_unique_violation",
    # Entity-specific repositories
    "UserRepository",
    "CategoryRepository",
    "TagRepository",
    "TagLinkRepository",
    "ProjectRepository",
    "BlogPostRepository",
    "BlogPostRow",
    "RelatedContentRepository",
    "UserSettingsRepository",
    "ContactMessageRepository",
]
