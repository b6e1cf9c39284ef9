"""
Shared fixtures.

Each test gets its own SQLite database file (aiosqlite) with the full
schema, so tests never see each other's rows.
"""

import os

# Settings are read once at import time, before any folio module loads
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["BCRYPT_ROUNDS"] = "4"

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from folio.api.main import create_application
from folio.config.settings import Settings
from folio.shared.db import Database
from folio.shared.models import Base, User, UserRole
from folio.shared.services.auth_service import AuthService
from folio.shared.utils.security import TokenIssuer


PASSWORD = "secret123"


def enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let pysqlite/aiosqlite run real transactions.

    The driver's own BEGIN handling breaks SAVEPOINT; emit BEGIN ourselves
    and turn on foreign key enforcement (needed for ON DELETE rules).
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, _connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


@pytest.fixture
def app_settings(tmp_path) -> Settings:
    return Settings(
        APP_ENV="testing",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'folio.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        MAX_UPLOAD_BYTES=1024,
    )


@pytest.fixture
async def database(app_settings) -> AsyncGenerator[Database, None]:
    db = Database(app_settings.DATABASE_URL)
    enable_sqlite_savepoints(db.engine)
    async with db.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db
    await db.dispose()


@pytest.fixture
async def session(database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session() as s:
        yield s


@pytest.fixture
def token_issuer(app_settings) -> TokenIssuer:
    return TokenIssuer.from_settings(app_settings)


@pytest.fixture
async def client(app_settings, database) -> AsyncGenerator[AsyncClient, None]:
    app = create_application(app_settings, database=database)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def create_user(
    database: Database,
    username: str,
    email: str,
    role: UserRole = UserRole.USER,
    password: str = PASSWORD,
) -> User:
    """Insert a committed user outside any request."""
    async with database.session() as s:
        user = await AuthService(s).register_user(username, email, password, role=role)
        await s.commit()
        return user


def bearer(token_issuer: TokenIssuer, user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {token_issuer.issue(user.id, user.username, user.role)}"}


@pytest.fixture
async def admin_user(database) -> User:
    return await create_user(database, "admin", "admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
async def regular_user(database) -> User:
    return await create_user(database, "bob", "bob@example.com")


@pytest.fixture
def admin_headers(token_issuer, admin_user) -> dict[str, str]:
    return bearer(token_issuer, admin_user)


@pytest.fixture
def user_headers(token_issuer, regular_user) -> dict[str, str]:
    return bearer(token_issuer, regular_user)
