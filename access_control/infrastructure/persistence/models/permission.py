"""Permission catalog and RolePermission link ORM models (RBAC)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from access_control.infrastructure.persistence.database import Base
from access_control.infrastructure.persistence.models.mixins import (
    AuditedEntityMixin,
    CreatorMixin,
    CuidMixin,
)


class Permission(AuditedEntityMixin, Base):
    """Permission catalog entry. Table: permission. Unique code (module:action)."""

    __tablename__ = "permission"

    code: Mapped[str] = mapped_column(String, nullable=False)
    module: Mapped[str] = mapped_column(String, nullable=False)
    action: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("code", name="uq_permission_code"),
        Index("ix_permission_module_action", "module", "action"),
    )


class RolePermission(CuidMixin, CreatorMixin, Base):
    """Many-to-many role-permission. Table: role_permission."""

    __tablename__ = "role_permission"

    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    permission_id: Mapped[str] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("role_id", "permission_id", name="uq_role_permission"),
        Index("ix_role_permission_role", "role_id"),
    )
