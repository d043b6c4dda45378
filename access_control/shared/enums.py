"""Shared enumerations for the access-control service.

Cross-cutting enums used by application and infrastructure (e.g. actor
type). Domain-specific enums (e.g. PermissionAction) live in
access_control.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ActorType(_ValuesMixin, str, Enum):
    """Who is performing the action recorded as creator."""

    USER = "user"
    SYSTEM = "system"
