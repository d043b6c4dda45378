"""Application services: permission flattening, catalog resolution, identity, role creation."""

from access_control.application.services.identity_service import IdentityResolver
from access_control.application.services.permission_flattener import (
    flatten_permission_grants,
)
from access_control.application.services.permission_service import PermissionService
from access_control.application.services.role_service import RoleService

__all__ = [
    "IdentityResolver",
    "PermissionService",
    "RoleService",
    "flatten_permission_grants",
]
