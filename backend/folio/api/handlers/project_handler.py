"""
Project Handler

Public project listing and admin project management.

Routers:
========
    router        → /api/projects          (public)
    admin_router  → /api/admin/projects    (admin only)
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from folio.shared.schemas.common import CreatedResponse, MessageResponse
from folio.shared.schemas.project import ProjectResponse, ProjectWrite
from folio.shared.services.project_service import ProjectService
from folio.api.dependencies import AdminUser
from folio.api.dependencies.services import get_project_service


router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Return at most this many"),
    project_service: ProjectService = Depends(get_project_service),
):
    """Projects newest first with category and tags."""
    return await project_service.list_projects(limit=limit)


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN
# ═══════════════════════════════════════════════════════════════════════════════


@admin_router.get("", response_model=list[ProjectResponse])
async def admin_list_projects(
    admin: AdminUser,
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.list_projects()


@admin_router.post(
    "",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    data: ProjectWrite,
    admin: AdminUser,
    project_service: ProjectService = Depends(get_project_service),
):
    """
    Create a project; tags are created on the fly.

    Raises:
        400: Missing title/description or unknown category
    """
    project = await project_service.create_project(
        title=data.title,
        description=data.description,
        category_id=data.category_id,
        image_url=data.image_url,
        tags=data.tags,
        created_by=admin.user_id,
    )
    return CreatedResponse(message="Project created successfully", id=project["id"])


@admin_router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: int,
    admin: AdminUser,
    project_service: ProjectService = Depends(get_project_service),
):
    return await project_service.get_project(project_id)


@admin_router.put("/{project_id}", response_model=MessageResponse)
async def update_project(
    project_id: int,
    data: ProjectWrite,
    admin: AdminUser,
    project_service: ProjectService = Depends(get_project_service),
):
    """Replace all fields; the tag list replaces the current tags."""
    await project_service.update_project(
        project_id,
        title=data.title,
        description=data.description,
        category_id=data.category_id,
        image_url=data.image_url,
        tags=data.tags,
    )
    return MessageResponse(message="Project updated successfully")


@admin_router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    admin: AdminUser,
    project_service: ProjectService = Depends(get_project_service),
):
    await project_service.delete_project(project_id)
    return MessageResponse(message="Project deleted successfully")
