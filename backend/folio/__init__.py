"""
Folio Backend

Portfolio and blog content management API.

Package Structure:
==================
    folio/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server (from backend/)
    uvicorn folio.api.main:app --reload

    # Migrations (from the repository root)
    alembic upgrade head
"""
