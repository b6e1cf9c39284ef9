"""
Category Handler

Admin CRUD for categories.
"""

from fastapi import APIRouter, Depends, status

from folio.shared.schemas.common import MessageResponse
from folio.shared.schemas.project import CategoryResponse, CategoryWrite
from folio.shared.services.category_service import CategoryService
from folio.api.dependencies import AdminUser
from folio.api.dependencies.services import get_category_service


router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    admin: AdminUser,
    category_service: CategoryService = Depends(get_category_service),
):
    return await category_service.list_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    data: CategoryWrite,
    admin: AdminUser,
    category_service: CategoryService = Depends(get_category_service),
):
    """
    Raises:
        400: Missing name
        409: Name or slug already used
    """
    return await category_service.create_category(data.name, data.description)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    admin: AdminUser,
    category_service: CategoryService = Depends(get_category_service),
):
    return await category_service.get_category(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    data: CategoryWrite,
    admin: AdminUser,
    category_service: CategoryService = Depends(get_category_service),
):
    return await category_service.update_category(category_id, data.name, data.description)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    admin: AdminUser,
    category_service: CategoryService = Depends(get_category_service),
):
    """Projects and posts in the category are kept, uncategorized."""
    await category_service.delete_category(category_id)
    return MessageResponse(message="Category deleted successfully")
