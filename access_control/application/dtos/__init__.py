"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from access_control.application.dtos.permission import PermissionGrant, PermissionResult
from access_control.application.dtos.role import RoleResult
from access_control.application.dtos.role_permission import (
    LinkAlreadyExists,
    LinkCreated,
    LinkFailed,
    LinkOutcome,
    RolePermissionResult,
)
from access_control.application.dtos.user import UserIdentity, UserResult

__all__ = [
    "LinkAlreadyExists",
    "LinkCreated",
    "LinkFailed",
    "LinkOutcome",
    "PermissionGrant",
    "PermissionResult",
    "RolePermissionResult",
    "RoleResult",
    "UserIdentity",
    "UserResult",
]
