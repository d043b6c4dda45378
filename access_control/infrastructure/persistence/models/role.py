"""Role ORM model."""

from typing import Any

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from access_control.infrastructure.persistence.database import Base
from access_control.infrastructure.persistence.models.mixins import (
    AuditedEntityMixin,
)


class Role(AuditedEntityMixin, Base):
    """Role. Table: role. Unique code.

    requested_permissions is the permission tree exactly as submitted, kept
    for audit/display; role_permission rows are the structured grants.
    """

    __tablename__ = "role"

    code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    requested_permissions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )

    __table_args__ = (UniqueConstraint("code", name="uq_role_code"),)
