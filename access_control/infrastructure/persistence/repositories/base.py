"""Base repository: shared lookups and persistence for ORM models."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_entity_by_id and create.

    Subclasses map ORM rows to application DTOs; methods here return ORM
    instances for use inside the repository layer only.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record inside a savepoint and refresh server defaults.

        A failing INSERT rolls back only the savepoint, so the caller's
        transaction stays usable.
        """
        async with self.db.begin_nested():
            self.db.add(obj)
            await self.db.flush()
        await self.db.refresh(obj)
        return obj
