"""User repository. Read methods return UserResult (DTO)."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.user import UserResult
from access_control.infrastructure.persistence.models.user import User
from access_control.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: User) -> UserResult:
    """Map ORM User to application UserResult."""
    return UserResult(
        id=u.id,
        username=u.username,
        email=u.email,
        is_active=u.is_active,
    )


class UserRepository(BaseRepository[User]):
    """User lookups for identity resolution; create_user for local setup scripts."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(self, user_id: str) -> UserResult | None:
        row = await self.get_entity_by_id(user_id)
        return _user_to_result(row) if row else None

    async def create_user(
        self, username: str, email: str, *, is_active: bool = True
    ) -> UserResult:
        """Create a user; return read-model DTO."""
        created = await self.create(
            User(username=username, email=email, is_active=is_active)
        )
        return _user_to_result(created)
