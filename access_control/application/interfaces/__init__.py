"""Application interfaces (ports) implemented by infrastructure."""

from access_control.application.interfaces.repositories import (
    IPermissionRepository,
    IRolePermissionRepository,
    IRoleRepository,
    IUserRepository,
)

__all__ = [
    "IPermissionRepository",
    "IRolePermissionRepository",
    "IRoleRepository",
    "IUserRepository",
]
