"""Permissions API: read-only view of the permission catalog."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from access_control.api.v1.dependencies import get_current_user, get_permission_repo
from access_control.application.dtos.user import UserResult
from access_control.infrastructure.persistence.repositories import PermissionRepository
from access_control.schemas.permission import PermissionResponse

router = APIRouter()


@router.get("", response_model=list[PermissionResponse])
async def list_permissions(
    _: Annotated[UserResult, Depends(get_current_user)],
    permission_repo: Annotated[PermissionRepository, Depends(get_permission_repo)],
    module: str | None = None,
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
):
    """List catalog entries, optionally for one module (paginated)."""
    permissions = await permission_repo.list_permissions(
        module=module, skip=skip, limit=limit
    )
    return [PermissionResponse.model_validate(p) for p in permissions]
