"""Permission catalog repository: atomic get-or-create keyed by canonical code."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.permission import PermissionResult
from access_control.domain.exceptions import PersistenceException
from access_control.infrastructure.persistence.models.permission import Permission
from access_control.infrastructure.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _permission_to_result(p: Permission) -> PermissionResult:
    """Map ORM Permission to application PermissionResult."""
    return PermissionResult(
        id=p.id,
        code=p.code,
        module=p.module,
        action=p.action,
        description=p.description,
        created_by=p.created_by,
    )


class PermissionRepository(BaseRepository[Permission]):
    """Shared permission catalog. Entries are created lazily and never updated here."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Permission)

    async def _get_entity_by_code(self, code: str) -> Permission | None:
        result = await self.db.execute(select(Permission).where(Permission.code == code))
        return result.scalar_one_or_none()

    async def get_by_code(self, code: str) -> PermissionResult | None:
        row = await self._get_entity_by_code(code)
        return _permission_to_result(row) if row else None

    async def list_permissions(
        self, module: str | None = None, skip: int = 0, limit: int = 100
    ) -> list[PermissionResult]:
        q = select(Permission)
        if module:
            q = q.where(Permission.module == module.lower())
        q = q.order_by(Permission.module, Permission.action).offset(skip).limit(limit)
        result = await self.db.execute(q)
        return [_permission_to_result(p) for p in result.scalars().all()]

    async def get_or_create(
        self,
        code: str,
        module: str,
        action: str,
        description: str | None,
        created_by: str | None,
    ) -> PermissionResult:
        """Insert the entry if absent, then read it back. Existing rows are untouched.

        The insert is a single INSERT .. ON CONFLICT (code) DO NOTHING RETURNING;
        only when it returns nothing is the existing row fetched. Two concurrent
        callers end with one row and both read that row. Everything runs in a
        savepoint so a failure leaves the caller's transaction usable.

        Raises:
            PersistenceException: Storage failure, or the row is missing after upsert.
        """
        values = {
            "code": code,
            "module": module,
            "action": action,
            "description": description,
            "created_by": created_by,
        }
        try:
            async with self.db.begin_nested():
                row = await self._insert_if_absent(values)
                if row is None:
                    row = await self._get_entity_by_code(code)
        except SQLAlchemyError as e:
            raise PersistenceException("permission.get_or_create", str(e)) from e
        if row is None:
            raise PersistenceException(
                "permission.get_or_create", f"no catalog entry for {code!r} after upsert"
            )
        return _permission_to_result(row)

    async def _insert_if_absent(self, values: dict[str, Any]) -> Permission | None:
        """Return the new row, or None when the code already exists."""
        dialect = self.db.get_bind().dialect.name
        if dialect in ("postgresql", "sqlite"):
            insert = pg_insert if dialect == "postgresql" else sqlite_insert
            stmt = (
                insert(Permission)
                .values(**values)
                .on_conflict_do_nothing(index_elements=[Permission.code])
                .returning(Permission)
            )
            return (await self.db.scalars(stmt)).one_or_none()
        entity = Permission(**values)
        try:
            async with self.db.begin_nested():
                self.db.add(entity)
        except IntegrityError:
            # Another transaction created the same entry concurrently.
            logger.debug("Permission %s already in catalog", values["code"])
            return None
        return entity
