"""
User Settings Handler

The authenticated user's own preferences.
"""

from fastapi import APIRouter, Depends

from folio.shared.schemas.settings import (
    UserSettingsResponse,
    UserSettingsUpdate,
    UserSettingsUpdateResponse,
)
from folio.shared.schemas.user import UserResponse
from folio.shared.services.settings_service import SettingsService
from folio.api.dependencies import CurrentUser
from folio.api.dependencies.services import get_settings_service


router = APIRouter()


@router.get("/settings", response_model=UserSettingsResponse)
async def get_settings(
    current_user: CurrentUser,
    settings_service: SettingsService = Depends(get_settings_service),
):
    """Current settings; defaults are stored on first read."""
    return await settings_service.get_or_create(current_user.user_id)


@router.put("/settings", response_model=UserSettingsUpdateResponse)
async def update_settings(
    data: UserSettingsUpdate,
    current_user: CurrentUser,
    settings_service: SettingsService = Depends(get_settings_service),
):
    """
    Store preferences and optionally a new username/email.

    Raises:
        409: The new username or email belongs to someone else
    """
    settings_row, user = await settings_service.update_settings(
        current_user.user_id,
        theme=data.theme,
        language=data.language,
        email_notifications=data.email_notifications,
        username=data.username,
        email=data.email,
    )
    return UserSettingsUpdateResponse(
        settings=UserSettingsResponse.model_validate(settings_row),
        user=UserResponse.model_validate(user),
    )
