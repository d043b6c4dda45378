"""DTOs for role-permission linking, including the link outcome variants.

Linking returns exactly one of LinkCreated, LinkAlreadyExists or LinkFailed;
callers match on the variant instead of inspecting error codes.
"""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class RolePermissionResult:
    """Role-permission link read-model."""

    id: str
    role_id: str
    permission_id: str
    created_by: str | None = None


@dataclass(frozen=True)
class LinkCreated:
    """A new link was persisted."""

    link: RolePermissionResult


@dataclass(frozen=True)
class LinkAlreadyExists:
    """The (role, permission) pair was already linked; nothing was written."""

    role_id: str
    permission_id: str


@dataclass(frozen=True)
class LinkFailed:
    """The link could not be written for a reason other than a duplicate."""

    role_id: str
    permission_id: str
    reason: str


LinkOutcome: TypeAlias = LinkCreated | LinkAlreadyExists | LinkFailed
