"""
Settings, Contact & Upload Schemas
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from folio.shared.models.enums import MessageStatus, Theme
from folio.shared.schemas.common import BaseSchema
from folio.shared.schemas.user import UserResponse


class UserSettingsResponse(BaseSchema):
    user_id: int
    theme: Theme
    language: str
    email_notifications: bool
    created_at: datetime
    updated_at: datetime


class UserSettingsUpdate(BaseModel):
    """
    PUT /api/user/settings body.

    The frontend sends emailNotifications in camelCase; both spellings
    are accepted. username/email, when non-empty, update the profile.
    """

    model_config = ConfigDict(populate_by_name=True)

    theme: Theme = Theme.LIGHT
    language: str = Field(default="en", min_length=1, max_length=10)
    email_notifications: bool = Field(default=True, alias="emailNotifications")
    username: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None


class UserSettingsUpdateResponse(BaseModel):
    settings: UserSettingsResponse
    user: UserResponse


# ═══════════════════════════════════════════════════════════════════════════════
# CONTACT
# ═══════════════════════════════════════════════════════════════════════════════


class ContactCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(min_length=1)


class ContactResponse(BaseSchema):
    id: int
    name: str
    email: str
    message: str
    status: MessageStatus
    created_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# UPLOAD
# ═══════════════════════════════════════════════════════════════════════════════


class UploadResponse(BaseModel):
    url: str
