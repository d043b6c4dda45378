"""RolePermission repository: role-permission links (single entity responsibility)."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.role_permission import (
    LinkAlreadyExists,
    LinkCreated,
    LinkFailed,
    LinkOutcome,
    RolePermissionResult,
)
from access_control.infrastructure.persistence.models.permission import (
    Permission,
    RolePermission,
)

logger = logging.getLogger(__name__)


def _link_to_result(rp: RolePermission) -> RolePermissionResult:
    """Map ORM RolePermission to application RolePermissionResult."""
    return RolePermissionResult(
        id=rp.id,
        role_id=rp.role_id,
        permission_id=rp.permission_id,
        created_by=rp.created_by,
    )


class RolePermissionRepository:
    """Role-permission link table only. Link and query permissions for a role."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _link_exists(self, role_id: str, permission_id: str) -> bool:
        result = await self.db.execute(
            select(RolePermission.id).where(
                RolePermission.role_id == role_id,
                RolePermission.permission_id == permission_id,
            )
        )
        return result.first() is not None

    async def link_permission_to_role(
        self, role_id: str, permission_id: str, created_by: str | None
    ) -> LinkOutcome:
        """Insert the (role, permission) link inside a savepoint and classify the result.

        An IntegrityError counts as LinkAlreadyExists only when the pair is
        found afterwards; otherwise (e.g. a missing role or permission row) it
        is LinkFailed, as is any other storage error.
        """
        rp = RolePermission(
            role_id=role_id,
            permission_id=permission_id,
            created_by=created_by,
        )
        try:
            async with self.db.begin_nested():
                self.db.add(rp)
                await self.db.flush()
        except IntegrityError as e:
            try:
                exists = await self._link_exists(role_id, permission_id)
            except SQLAlchemyError as lookup_error:
                return LinkFailed(role_id, permission_id, str(lookup_error))
            if exists:
                return LinkAlreadyExists(role_id, permission_id)
            logger.warning(
                "Integrity error linking permission %s to role %s", permission_id, role_id
            )
            return LinkFailed(role_id, permission_id, str(e.orig))
        except SQLAlchemyError as e:
            return LinkFailed(role_id, permission_id, str(e))
        return LinkCreated(_link_to_result(rp))

    async def get_permission_codes_for_role(self, role_id: str) -> list[str]:
        result = await self.db.execute(
            select(Permission.code)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .where(RolePermission.role_id == role_id)
            .order_by(Permission.code)
        )
        return list(result.scalars().all())
