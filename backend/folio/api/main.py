"""
Folio API Application Entry Point

FastAPI application setup with all routers, middleware, and lifecycle management.

Application Architecture:
=========================
┌─────────────────────────────────────────────────────────────────────────────┐
│                           FOLIO API                                         │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                    Middleware Stack                          │          │
│   │  ┌─────────────────────────────────────────────────────┐    │          │
│   │  │ CORS Middleware                                      │    │          │
│   │  │ Log context (method, path)                           │    │          │
│   │  │ Error Handler                                        │    │          │
│   │  └─────────────────────────────────────────────────────┘    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                       Routers                                │          │
│   │  ┌────────┐ ┌──────┐ ┌───────┐ ┌──────────┐ ┌──────┐       │          │
│   │  │ Health │ │ Auth │ │ Admin │ │ Projects │ │ Blog │ ...   │          │
│   │  └────────┘ └──────┘ └───────┘ └──────────┘ └──────┘       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                              │                                              │
│                              ▼                                              │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │                Dependencies (Injected)                       │          │
│   │  ┌──────────┐ ┌──────────┐ ┌──────────┐                    │          │
│   │  │ Database │ │   Auth   │ │ Services │                    │          │
│   │  └──────────┘ └──────────┘ └──────────┘                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Application State:
==================
    app.state.settings      ← Settings the app was created with
    app.state.token_issuer  ← TokenIssuer (secret, algorithm, expiry)
    app.state.db            ← Database (engine + session factory)

Lifecycle:
==========
1. Application starts → lifespan startup
2. Database created (unless injected) and connectivity verified
3. Upload directory created
4. Application serves requests
5. Application stops → lifespan shutdown
6. Database pool disposed

Usage:
======
    # Run with uvicorn (from backend/)
    uvicorn folio.api.main:app --host 0.0.0.0 --port 8080 --reload

    # Or programmatically
    from folio.api.main import create_application
    app = create_application(settings, database=Database("sqlite+aiosqlite:///folio.db"))
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from folio.config.settings import Settings, get_settings
from folio.shared.db import Database, init_db, close_db
from folio.shared.core.logging import clear_log_context, log_context, logger
from folio.shared.utils.security import TokenIssuer
from folio.api.middleware import setup_exception_handlers
from folio.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup:
    - Create (or reuse the injected) Database and verify connectivity
    - Make sure the upload directory exists

    Shutdown:
    - Dispose the connection pool
    """
    config: Settings = app.state.settings

    # ═══════════════════════════════════════════════════════════════════════════
    # STARTUP
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info(
        "Starting Folio API",
        app_name=config.APP_NAME,
        version=config.APP_VERSION,
        environment=config.APP_ENV,
    )

    app.state.db = await init_db(config, getattr(app.state, "db", None))
    Path(config.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)

    logger.info("Folio API started successfully")

    yield

    # ═══════════════════════════════════════════════════════════════════════════
    # SHUTDOWN
    # ═══════════════════════════════════════════════════════════════════════════
    logger.info("Shutting down Folio API")

    await close_db(app.state.db)

    logger.info("Folio API shutdown complete")


def create_application(
    config: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use; defaults to the environment's settings
        database: Pre-built Database (tests pass a SQLite one)

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings
    2. Builds the token issuer and stores shared objects on app.state
    3. Adds middleware (CORS, log context)
    4. Sets up exception handlers
    5. Registers all routes and the uploads mount
    """
    config = config or get_settings()

    app = FastAPI(
        title=config.APP_NAME,
        description="Portfolio and blog content management API",
        version=config.APP_VERSION,
        # Only show docs in development
        docs_url="/docs" if config.DEBUG else None,
        redoc_url="/redoc" if config.DEBUG else None,
        # Use lifespan for startup/shutdown
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.token_issuer = TokenIssuer.from_settings(config)
    if database is not None:
        app.state.db = database

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    # CORS Middleware - Must be added first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        clear_log_context()
        log_context(method=request.method, path=request.url.path)
        return await call_next(request)

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    # Directory is created on startup
    app.mount(
        config.UPLOAD_URL_PREFIX,
        StaticFiles(directory=config.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    return app


# Create the application instance
app = create_application()
