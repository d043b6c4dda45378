"""Concurrent writers on a file-backed SQLite database (one connection per session)."""

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from access_control.application.dtos.permission import PermissionResult
from access_control.application.dtos.role_permission import (
    LinkAlreadyExists,
    LinkCreated,
    LinkOutcome,
)
from access_control.infrastructure.persistence.database import Base, build_engine
from access_control.infrastructure.persistence.models import Permission, RolePermission
from access_control.infrastructure.persistence.repositories import (
    PermissionRepository,
    RolePermissionRepository,
    RoleRepository,
    UserRepository,
)

pytestmark = pytest.mark.requires_db


@pytest.fixture
async def sessions(tmp_path: Path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory over a fresh file database; each session gets its own connection."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'concurrent.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, expire_on_commit=False)
    await engine.dispose()


async def _count(factory: async_sessionmaker[AsyncSession], model: type) -> int:
    async with factory() as session:
        return (
            await session.execute(select(func.count()).select_from(model))
        ).scalar_one()


async def test_concurrent_get_or_create_yields_one_entry(sessions) -> None:
    """Two transactions resolving the same new code agree on a single catalog row."""

    async def resolve(description: str) -> PermissionResult:
        async with sessions() as session:
            result = await PermissionRepository(session).get_or_create(
                code="users:read",
                module="users",
                action="read",
                description=description,
                created_by=None,
            )
            await session.commit()
            return result

    first, second = await asyncio.gather(resolve("first"), resolve("second"))

    assert first.id == second.id
    assert first.description == second.description
    assert await _count(sessions, Permission) == 1


async def test_concurrent_link_of_same_pair(sessions) -> None:
    """Two transactions linking the same pair: one creates it, the other sees it exists."""
    async with sessions() as session:
        user = await UserRepository(session).create_user(
            username="alice", email="alice@example.local"
        )
        role = await RoleRepository(session).create_role(
            code="viewer", name="Viewer", requested_permissions=[], created_by=user.id
        )
        perm = await PermissionRepository(session).get_or_create(
            code="users:read",
            module="users",
            action="read",
            description=None,
            created_by=user.id,
        )
        await session.commit()

    async def link() -> LinkOutcome:
        async with sessions() as session:
            outcome = await RolePermissionRepository(session).link_permission_to_role(
                role.id, perm.id, user.id
            )
            await session.commit()
            return outcome

    outcomes = await asyncio.gather(link(), link())

    assert sorted(type(o).__name__ for o in outcomes) == [
        LinkAlreadyExists.__name__,
        LinkCreated.__name__,
    ]
    assert await _count(sessions, RolePermission) == 1
