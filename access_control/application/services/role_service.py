"""Role application service: create a role and link its requested permissions."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from access_control.application.dtos.permission import PermissionGrant
from access_control.application.dtos.role import RoleResult
from access_control.application.dtos.role_permission import (
    LinkAlreadyExists,
    LinkCreated,
    LinkFailed,
)
from access_control.application.interfaces.repositories import (
    IRolePermissionRepository,
    IRoleRepository,
    IUnitOfWork,
)
from access_control.application.services.identity_service import IdentityResolver
from access_control.application.services.permission_flattener import (
    flatten_permission_grants,
)
from access_control.application.services.permission_service import PermissionService
from access_control.domain.exceptions import (
    LinkingFailedException,
    PersistenceException,
)
from access_control.shared.context import ActorContext

logger = logging.getLogger(__name__)


class RoleService:
    """Create roles and link the permissions named by a menu/action tree.

    Permission codes are processed one at a time: resolve the catalog entry,
    then link it. The role and every finished step are committed as they
    complete, so a catalog row is locked only for the step that inserted it.
    The first non-duplicate failure aborts the rest; earlier work stays.
    """

    def __init__(
        self,
        identity_resolver: IdentityResolver,
        role_repo: IRoleRepository,
        permission_service: PermissionService,
        role_permission_repo: IRolePermissionRepository,
        unit_of_work: IUnitOfWork,
    ) -> None:
        self._identity_resolver = identity_resolver
        self._role_repo = role_repo
        self._permission_service = permission_service
        self._role_permission_repo = role_permission_repo
        self._unit_of_work = unit_of_work

    async def create_role(
        self,
        code: str,
        name: str,
        permission_tree: Sequence[PermissionGrant],
        request_context: ActorContext,
    ) -> RoleResult:
        """Create role with the tree exactly as requested, then link its permissions.

        Raises:
            AuthenticationException: No acting user could be resolved.
            DuplicateRoleCodeException: Role code already exists (nothing persisted).
            LinkingFailedException: A permission failed mid-sequence; the role
                and earlier links remain persisted.
        """
        creator = await self._identity_resolver.resolve(request_context)
        requested: list[dict[str, Any]] = [
            grant.to_snapshot() for grant in permission_tree
        ]
        role = await self._role_repo.create_role(
            code=code,
            name=name,
            requested_permissions=requested,
            created_by=creator.id,
        )
        await self._unit_of_work.commit()
        logger.info("Created role id=%s code=%s", role.id, role.code)

        # Resolved again on purpose: the linking phase does not reuse the role phase's identity.
        linker = await self._identity_resolver.resolve(request_context)
        codes = flatten_permission_grants(permission_tree)
        linked = await self._link_permissions(role.id, codes, linker.id)
        logger.info(
            "Linked %d permission(s) to role id=%s (%d requested)",
            linked,
            role.id,
            len(codes),
        )
        return role

    async def _link_permissions(
        self, role_id: str, codes: list[str], created_by: str
    ) -> int:
        """Resolve and link each code in order, committing per code; return new links."""
        created = 0
        for processed, perm_code in enumerate(codes):
            try:
                permission = await self._permission_service.resolve(perm_code, created_by)
            except PersistenceException as e:
                await self._abort(role_id, perm_code, processed)
                raise LinkingFailedException(
                    role_id, perm_code, processed, e.details.get("reason", e.message)
                ) from e
            outcome = await self._role_permission_repo.link_permission_to_role(
                role_id=role_id,
                permission_id=permission.id,
                created_by=created_by,
            )
            match outcome:
                case LinkCreated():
                    created += 1
                case LinkAlreadyExists():
                    logger.debug(
                        "Permission %s already linked to role id=%s", perm_code, role_id
                    )
                case LinkFailed(reason=reason):
                    await self._abort(role_id, perm_code, processed)
                    raise LinkingFailedException(role_id, perm_code, processed, reason)
            await self._unit_of_work.commit()
        return created

    async def _abort(self, role_id: str, perm_code: str, processed: int) -> None:
        """Keep whatever the failing step managed to write (e.g. its catalog entry)."""
        logger.warning(
            "Aborting permission linking for role id=%s at %s after %d processed",
            role_id,
            perm_code,
            processed,
        )
        await self._unit_of_work.commit()
