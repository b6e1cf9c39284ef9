"""
User Schemas

Request/response models for authentication and user administration.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from folio.shared.models.enums import UserRole
from folio.shared.schemas.common import BaseSchema


PASSWORD_MIN_LENGTH = 6


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH,
        description="Password (minimum 6 characters)",
    )


class UserLogin(BaseModel):
    """Schema for user login."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class SessionUser(BaseSchema):
    """User identity returned next to a login token."""

    id: int
    username: str
    role: UserRole


class LoginResponse(BaseModel):
    """Schema for login response."""

    token: str
    user: SessionUser


class UserResponse(BaseSchema):
    """Schema for user profile and admin listings."""

    id: int
    username: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN
# ═══════════════════════════════════════════════════════════════════════════════


class AdminUserCreate(UserCreate):
    """Admin-side account creation; the role can be chosen."""

    role: UserRole = UserRole.USER


class AdminUserUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    username: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=PASSWORD_MIN_LENGTH)
    role: Optional[UserRole] = None


class RoleUpdate(BaseModel):
    role: UserRole


class DashboardStatistics(BaseModel):
    total_users: int
    admin_count: int
    user_count: int


class DashboardResponse(BaseModel):
    message: str
    statistics: DashboardStatistics
