"""Persistence repositories. Re-exports for dependency injection."""

from access_control.infrastructure.persistence.repositories.base import BaseRepository
from access_control.infrastructure.persistence.repositories.permission_repo import (
    PermissionRepository,
)
from access_control.infrastructure.persistence.repositories.role_permission_repo import (
    RolePermissionRepository,
)
from access_control.infrastructure.persistence.repositories.role_repo import RoleRepository
from access_control.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "PermissionRepository",
    "RolePermissionRepository",
    "RoleRepository",
    "UserRepository",
]
