"""Role repository. Read methods return RoleResult (DTO)."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.role import RoleResult
from access_control.domain.exceptions import (
    DuplicateRoleCodeException,
    PersistenceException,
)
from access_control.infrastructure.persistence.models.role import Role
from access_control.infrastructure.persistence.repositories.base import BaseRepository


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        code=r.code,
        name=r.name,
        requested_permissions=list(r.requested_permissions or []),
        created_by=r.created_by,
    )


class RoleRepository(BaseRepository[Role]):
    """Role repository. Roles are created once and not modified by this service."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def create_role(
        self,
        code: str,
        name: str,
        requested_permissions: list[dict[str, Any]],
        created_by: str | None,
    ) -> RoleResult:
        """Create a role; return read-model DTO.

        Raises:
            DuplicateRoleCodeException: Code already taken (checked first, and
                again when a concurrent insert wins the unique constraint).
            PersistenceException: Any other storage failure.
        """
        if await self.get_by_code(code):
            raise DuplicateRoleCodeException(code)
        role = Role(
            code=code,
            name=name,
            requested_permissions=requested_permissions,
            created_by=created_by,
        )
        try:
            created = await self.create(role)
        except IntegrityError as e:
            if await self.get_by_code(code):
                raise DuplicateRoleCodeException(code) from None
            raise PersistenceException("role.create", str(e.orig)) from e
        except SQLAlchemyError as e:
            raise PersistenceException("role.create", str(e)) from e
        return _role_to_result(created)

    async def get_by_id(self, role_id: str) -> RoleResult | None:
        row = await self.get_entity_by_id(role_id)
        return _role_to_result(row) if row else None

    async def get_by_code(self, code: str) -> RoleResult | None:
        result = await self.db.execute(select(Role).where(Role.code == code))
        row = result.scalar_one_or_none()
        return _role_to_result(row) if row else None
