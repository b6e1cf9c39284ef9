"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Utils: Password hashing, session tokens, slugs

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database engine and session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic environment and revisions
    └── utils/          ← Utilities

Usage:
======
    from folio.shared.models import User, Project
    from folio.shared.repositories import UserRepository
    from folio.shared.services import AuthService
    from folio.shared.schemas import UserCreate, LoginResponse
    from folio.shared.core import logger, FolioException
"""
