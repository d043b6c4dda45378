"""Domain layer: enums, value objects, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from access_control.domain.enums import PermissionAction
from access_control.domain.exceptions import (
    AccessControlException,
    AuthenticationException,
    DuplicateRoleCodeException,
    LinkingFailedException,
    PersistenceException,
    ResourceNotFoundException,
    ValidationException,
)
from access_control.domain.value_objects import PermissionCode

__all__ = [
    # Enums
    "PermissionAction",
    # Exceptions
    "AccessControlException",
    "AuthenticationException",
    "DuplicateRoleCodeException",
    "LinkingFailedException",
    "PersistenceException",
    "ResourceNotFoundException",
    "ValidationException",
    # Value objects
    "PermissionCode",
]
