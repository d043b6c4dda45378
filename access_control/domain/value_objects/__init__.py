"""Domain value objects: immutable, self-validating types."""

from access_control.domain.value_objects.core import PermissionCode

__all__ = ["PermissionCode"]
