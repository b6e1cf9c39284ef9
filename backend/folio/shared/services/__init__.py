"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Group multi-step writes in SAVEPOINTs (session.begin_nested())
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, profile
- UserService: Admin user management, dashboard statistics
- CategoryService: Category CRUD
- ProjectService: Project catalog reads and writes
- BlogService: Blog posts, slugs, views, related content
- TagReconciler: Tag get-or-create and link maintenance
- SettingsService: Per-user preferences
- ContactService: Contact form messages
- UploadService: Image uploads to local disk

Usage:
======
    from folio.shared.services import ProjectService

    projects = await ProjectService(db).list_projects(limit=6)
"""

from folio.shared.services.auth_service import AuthService
from folio.shared.services.user_service import UserService
from folio.shared.services.category_service import CategoryService
from folio.shared.services.tag_service import TagReconciler
from folio.shared.services.project_service import ProjectService
from folio.shared.services.blog_service import BlogService
from folio.shared.services.settings_service import SettingsService
from folio.shared.services.contact_service import ContactService
from folio.shared.services.upload_service import UploadService

__all__ = [
    "AuthService",
    "UserService",
    "CategoryService",
    "TagReconciler",
    "ProjectService",
    "BlogService",
    "SettingsService",
    "ContactService",
    "UploadService",
]
