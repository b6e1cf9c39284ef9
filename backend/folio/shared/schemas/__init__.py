"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- common: Base schema, message/error/health responses
- user: Authentication and user administration
- project: Projects and categories
- blog: Blog posts
- settings: User settings, contact form, upload

Usage:
======
    from folio.shared.schemas.user import UserCreate, LoginResponse
    from folio.shared.schemas.common import MessageResponse, ErrorResponse
"""

from folio.shared.schemas.common import (
    BaseSchema,
    NameList,
    MessageResponse,
    CreatedResponse,
    ErrorResponse,
    HealthResponse,
    TimestampMixin,
)
from folio.shared.schemas.user import (
    UserCreate,
    UserLogin,
    SessionUser,
    LoginResponse,
    UserResponse,
    AdminUserCreate,
    AdminUserUpdate,
    RoleUpdate,
    DashboardStatistics,
    DashboardResponse,
)
from folio.shared.schemas.project import (
    CategoryWrite,
    CategoryResponse,
    ProjectWrite,
    ProjectResponse,
)
from folio.shared.schemas.blog import (
    BlogPostWrite,
    RelatedProject,
    RelatedPost,
    BlogPostResponse,
    BlogPostDetailResponse,
)
from folio.shared.schemas.settings import (
    UserSettingsResponse,
    UserSettingsUpdate,
    UserSettingsUpdateResponse,
    ContactCreate,
    ContactResponse,
    UploadResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "NameList",
    "MessageResponse",
    "CreatedResponse",
    "ErrorResponse",
    "HealthResponse",
    "TimestampMixin",
    # User
    "UserCreate",
    "UserLogin",
    "SessionUser",
    "LoginResponse",
    "UserResponse",
    "AdminUserCreate",
    "AdminUserUpdate",
    "RoleUpdate",
    "DashboardStatistics",
    "DashboardResponse",
    # Projects & categories
    "CategoryWrite",
    "CategoryResponse",
    "ProjectWrite",
    "ProjectResponse",
    # Blog
    "BlogPostWrite",
    "RelatedProject",
    "RelatedPost",
    "BlogPostResponse",
    "BlogPostDetailResponse",
    # Settings, contact, upload
    "UserSettingsResponse",
    "UserSettingsUpdate",
    "UserSettingsUpdateResponse",
    "ContactCreate",
    "ContactResponse",
    "UploadResponse",
]
