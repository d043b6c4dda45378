"""Roles API: create a role with its permission tree, and read it back."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from access_control.api.v1.dependencies import (
    get_current_user,
    get_request_context,
    get_role_permission_repo,
    get_role_repo,
    get_role_service,
)
from access_control.application.dtos.user import UserResult
from access_control.application.services.role_service import RoleService
from access_control.core.limiter import limit_writes
from access_control.domain.exceptions import (
    LinkingFailedException,
    ResourceNotFoundException,
)
from access_control.infrastructure.persistence.repositories import (
    RolePermissionRepository,
    RoleRepository,
)
from access_control.schemas.role import (
    RoleCreateRequest,
    RoleDetailResponse,
    RoleResponse,
)
from access_control.shared.context import ActorContext

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RoleResponse, status_code=201)
@limit_writes
async def create_role(
    request: Request,
    body: RoleCreateRequest,
    actor: Annotated[ActorContext, Depends(get_request_context)],
    role_service: Annotated[RoleService, Depends(get_role_service)],
):
    """Create a role and link every permission named in its menu/action tree.

    The role and each finished permission step are committed as they
    complete, so a mid-sequence failure still leaves them in place.
    """
    try:
        role = await role_service.create_role(
            body.code, body.name, body.to_grants(), actor
        )
    except LinkingFailedException as e:
        logger.warning(
            "Role %s kept with %d permission(s) processed (request_id=%s)",
            e.role_id,
            e.processed_count,
            actor.request_id,
        )
        raise
    return RoleResponse.model_validate(role)


@router.get("/{role_id}", response_model=RoleDetailResponse)
async def get_role(
    role_id: str,
    _: Annotated[UserResult, Depends(get_current_user)],
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
    role_permission_repo: Annotated[
        RolePermissionRepository, Depends(get_role_permission_repo)
    ],
):
    """Get a role with the permission codes linked to it."""
    role = await role_repo.get_by_id(role_id)
    if not role:
        raise ResourceNotFoundException("role", role_id)
    codes = await role_permission_repo.get_permission_codes_for_role(role_id)
    return RoleDetailResponse(
        id=role.id,
        code=role.code,
        name=role.name,
        requested_permissions=role.requested_permissions,
        created_by=role.created_by,
        permission_codes=codes,
    )
