"""
Admin Handler

Dashboard statistics and user management. Every route requires an admin.
"""

from fastapi import APIRouter, Depends, status

from folio.shared.schemas.common import CreatedResponse, MessageResponse
from folio.shared.schemas.user import (
    AdminUserCreate,
    AdminUserUpdate,
    DashboardResponse,
    DashboardStatistics,
    RoleUpdate,
    UserResponse,
)
from folio.shared.services.user_service import UserService
from folio.api.dependencies import AdminUser
from folio.api.dependencies.services import get_user_service


router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    """User counts overall and per role."""
    statistics = await user_service.dashboard_statistics()
    return DashboardResponse(
        message="Welcome to admin dashboard",
        statistics=DashboardStatistics(**statistics),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# USERS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.list_users()


@router.post(
    "/users",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    data: AdminUserCreate,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    """
    Create an account with any role.

    Raises:
        409: Username or email already registered
    """
    user = await user_service.create_user(
        username=data.username,
        email=data.email,
        password=data.password,
        role=data.role,
    )
    return CreatedResponse(message="User created successfully", id=user.id)


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    return await user_service.get_user(user_id)


@router.put("/users/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    data: AdminUserUpdate,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    """Change any of username, email, password, role."""
    return await user_service.update_user(
        user_id,
        username=data.username,
        email=data.email,
        password=data.password,
        role=data.role,
    )


@router.put("/users/{user_id}/role", response_model=MessageResponse)
async def update_user_role(
    user_id: int,
    data: RoleUpdate,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.set_role(user_id, data.role)
    return MessageResponse(message="User role updated successfully")


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    admin: AdminUser,
    user_service: UserService = Depends(get_user_service),
):
    await user_service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully")
