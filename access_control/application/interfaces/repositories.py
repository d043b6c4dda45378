"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from access_control.application.dtos.permission import PermissionResult
    from access_control.application.dtos.role import RoleResult
    from access_control.application.dtos.role_permission import LinkOutcome
    from access_control.application.dtos.user import UserResult


class IUserRepository(Protocol):
    """Protocol for user lookups used by identity resolution (DIP)."""

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID."""


class IRoleRepository(Protocol):
    """Protocol for role repository (DIP)."""

    async def create_role(
        self,
        code: str,
        name: str,
        requested_permissions: list[dict[str, Any]],
        created_by: str | None,
    ) -> RoleResult:
        """Create role. Raises DuplicateRoleCodeException if code is taken."""

    async def get_by_id(self, role_id: str) -> RoleResult | None:
        """Return role by ID."""


class IPermissionRepository(Protocol):
    """Protocol for the permission catalog (DIP)."""

    async def get_by_code(self, code: str) -> PermissionResult | None:
        """Return catalog entry by canonical code."""

    async def get_or_create(
        self,
        code: str,
        module: str,
        action: str,
        description: str | None,
        created_by: str | None,
    ) -> PermissionResult:
        """Atomically insert the entry if absent, else return the existing one unchanged.

        Raises PersistenceException for storage failures other than the duplicate race.
        """


class IRolePermissionRepository(Protocol):
    """Protocol for role-permission links (DIP)."""

    async def link_permission_to_role(
        self, role_id: str, permission_id: str, created_by: str | None
    ) -> LinkOutcome:
        """Create the link; duplicates yield LinkAlreadyExists, other failures LinkFailed."""

    async def get_permission_codes_for_role(self, role_id: str) -> list[str]:
        """Return the canonical codes linked to the role."""


class IUnitOfWork(Protocol):
    """Commit point for work done through the repositories sharing one session."""

    async def commit(self) -> None:
        """Make everything written so far durable and release its row locks."""
