"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live      → Health checks
    /api/auth                   → Register, login, current user
    /api/admin                  → Dashboard, users              (admin)
    /api/admin/categories       → Category CRUD                 (admin)
    /api/admin/projects         → Project management            (admin)
    /api/admin/blog-posts       → Blog listing incl. drafts     (admin)
    /api/projects               → Project listing               (public)
    /api/blog-posts             → Blog reads (public), writes (admin)
    /api/user                   → Own settings                  (authenticated)
    /api/upload                 → Image upload                  (authenticated)
    /api/contact                → Contact form                  (public)

Usage:
======
    from folio.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from folio.api.handlers import (
    admin_handler,
    auth_handler,
    blog_handler,
    category_handler,
    contact_handler,
    health_handler,
    project_handler,
    settings_handler,
    upload_handler,
)


API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix=f"{API_PREFIX}/auth",
        tags=["Authentication"],
    )

    # Admin: dashboard and users
    app.include_router(
        admin_handler.router,
        prefix=f"{API_PREFIX}/admin",
        tags=["Admin"],
    )

    # Categories
    app.include_router(
        category_handler.router,
        prefix=f"{API_PREFIX}/admin/categories",
        tags=["Categories"],
    )

    # Projects
    app.include_router(
        project_handler.router,
        prefix=f"{API_PREFIX}/projects",
        tags=["Projects"],
    )
    app.include_router(
        project_handler.admin_router,
        prefix=f"{API_PREFIX}/admin/projects",
        tags=["Projects"],
    )

    # Blog posts
    app.include_router(
        blog_handler.router,
        prefix=f"{API_PREFIX}/blog-posts",
        tags=["Blog"],
    )
    app.include_router(
        blog_handler.admin_router,
        prefix=f"{API_PREFIX}/admin/blog-posts",
        tags=["Blog"],
    )

    # User settings
    app.include_router(
        settings_handler.router,
        prefix=f"{API_PREFIX}/user",
        tags=["Settings"],
    )

    # Upload and contact
    app.include_router(
        upload_handler.router,
        prefix=f"{API_PREFIX}/upload",
        tags=["Upload"],
    )
    app.include_router(
        contact_handler.router,
        prefix=f"{API_PREFIX}/contact",
        tags=["Contact"],
    )
