"""Pytest configuration and fixtures for access-control.

Env is set before any access_control import so Settings validate. Each
DB-backed test gets a fresh in-memory SQLite database (tables created from
ORM metadata, engine disposed afterwards).
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.user import UserResult
from access_control.core.config import get_settings
from access_control.infrastructure.persistence import database
from access_control.infrastructure.persistence.repositories import UserRepository
from access_control.infrastructure.security.jwt import issue_token
from access_control.main import app
from access_control.shared.context import clear_current_user

get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_actor_context() -> None:
    """Tests start without an authenticated actor."""
    clear_current_user()


@pytest.fixture
async def database_ready() -> AsyncIterator[None]:
    """Create tables in a fresh in-memory database; dispose it after the test."""
    await database.init_models()
    yield
    await database.dispose_engine()


@pytest.fixture
async def db_session(database_ready: None) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Uncommitted work is rolled back on close."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def user(database_ready: None) -> UserResult:
    """Committed active user, usable as creator and as the bearer of auth_headers."""
    async with database.session_scope() as session:
        return await UserRepository(session).create_user(
            username="alice", email="alice@example.local"
        )


@pytest.fixture
def auth_headers(user: UserResult) -> dict[str, str]:
    """Authorization header carrying a JWT for the user fixture."""
    return {"Authorization": f"Bearer {issue_token(user.id)}"}


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
