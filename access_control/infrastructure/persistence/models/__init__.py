"""Persistence models: ORM entities and mixins."""

from access_control.infrastructure.persistence.models.mixins import (
    AuditedEntityMixin,
    CreatorMixin,
    CuidMixin,
    TimestampMixin,
)
from access_control.infrastructure.persistence.models.permission import (
    Permission,
    RolePermission,
)
from access_control.infrastructure.persistence.models.role import Role
from access_control.infrastructure.persistence.models.user import User

__all__ = [
    "AuditedEntityMixin",
    "CreatorMixin",
    "CuidMixin",
    "Permission",
    "Role",
    "RolePermission",
    "TimestampMixin",
    "User",
]
