"""
Blog Handler

Routers:
========
    router        → /api/blog-posts          (reads public, writes admin)
    admin_router  → /api/admin/blog-posts    (admin views, drafts included)

Reading a post by slug counts a view every time it is called.
"""

from fastapi import APIRouter, Depends, status

from folio.shared.schemas.blog import BlogPostDetailResponse, BlogPostResponse, BlogPostWrite
from folio.shared.schemas.common import MessageResponse
from folio.shared.services.blog_service import BlogService
from folio.api.dependencies import AdminUser
from folio.api.dependencies.services import get_blog_service


router = APIRouter()
admin_router = APIRouter()


def _write_fields(data: BlogPostWrite) -> dict:
    return data.model_dump(
        include={
            "title",
            "content",
            "excerpt",
            "image_url",
            "meta_title",
            "meta_description",
            "keywords",
            "category_id",
            "status",
            "tags",
            "related_project_ids",
            "related_post_ids",
        }
    )


@router.get("", response_model=list[BlogPostResponse])
async def list_published_posts(
    blog_service: BlogService = Depends(get_blog_service),
):
    """Published posts, newest first."""
    return await blog_service.list_posts(published_only=True)


@router.get("/{slug}", response_model=BlogPostDetailResponse)
async def get_published_post(
    slug: str,
    blog_service: BlogService = Depends(get_blog_service),
):
    """
    One published post; increments its view counter.

    Raises:
        404: No published post with this slug
    """
    return await blog_service.get_published_post(slug)


@router.post(
    "",
    response_model=BlogPostDetailResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    data: BlogPostWrite,
    admin: AdminUser,
    blog_service: BlogService = Depends(get_blog_service),
):
    """
    Create a post authored by the calling admin.

    Raises:
        400: Missing title/content, title without letters or digits,
             unknown category or related ids
        409: Another post already uses the title's slug
    """
    return await blog_service.create_post(author_id=admin.user_id, **_write_fields(data))


@router.put("/{post_id}", response_model=BlogPostDetailResponse)
async def update_post(
    post_id: int,
    data: BlogPostWrite,
    admin: AdminUser,
    blog_service: BlogService = Depends(get_blog_service),
):
    return await blog_service.update_post(post_id, **_write_fields(data))


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    admin: AdminUser,
    blog_service: BlogService = Depends(get_blog_service),
):
    await blog_service.delete_post(post_id)
    return MessageResponse(message="Blog post deleted successfully")


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN
# ═══════════════════════════════════════════════════════════════════════════════


@admin_router.get("", response_model=list[BlogPostResponse])
async def admin_list_posts(
    admin: AdminUser,
    blog_service: BlogService = Depends(get_blog_service),
):
    """All posts, drafts included."""
    return await blog_service.list_posts(published_only=False)


@admin_router.get("/{post_id}", response_model=BlogPostDetailResponse)
async def admin_get_post(
    post_id: int,
    admin: AdminUser,
    blog_service: BlogService = Depends(get_blog_service),
):
    """Any post by id. Does not count a view."""
    return await blog_service.get_post(post_id)
