"""User, RBAC (roles/permissions), and auth dependencies (composition root).

All repositories in one request share the session from get_db. RoleService
commits on that session after the role and after each permission step.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.user import UserResult
from access_control.application.services.identity_service import IdentityResolver
from access_control.application.services.permission_service import PermissionService
from access_control.application.services.role_service import RoleService
from access_control.core.config import get_settings
from access_control.infrastructure.persistence.database import get_db
from access_control.infrastructure.persistence.repositories import (
    PermissionRepository,
    RolePermissionRepository,
    RoleRepository,
    UserRepository,
)
from access_control.infrastructure.security.jwt import token_subject
from access_control.shared.context import ActorContext, get_actor_context, set_current_user
from access_control.shared.enums import ActorType

_http_bearer = HTTPBearer(auto_error=False)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User repository for identity lookups."""
    return UserRepository(db)


async def get_role_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RoleRepository:
    """Role repository (create, get by id)."""
    return RoleRepository(db)


async def get_permission_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PermissionRepository:
    """Permission catalog repository (get-or-create, list)."""
    return PermissionRepository(db)


async def get_role_permission_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RolePermissionRepository:
    """Role-permission link repository."""
    return RolePermissionRepository(db)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present; else None."""
    if not credentials:
        return None
    try:
        user_id = token_subject(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id(user_id)
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    request: Request,
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT and record it as the request actor; 401 if missing."""
    if current_user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    set_current_user(
        current_user.id,
        ActorType.USER,
        request_id=getattr(request.state, "request_id", None),
    )
    return current_user


async def get_request_context(
    _: Annotated[UserResult, Depends(get_current_user)],
) -> ActorContext:
    """Snapshot of the authenticated actor, passed explicitly to services."""
    return get_actor_context()


def get_identity_resolver(
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> IdentityResolver:
    """Identity resolver backed by the user table (composition root)."""
    return IdentityResolver(user_repo)


def get_permission_service(
    permission_repo: Annotated[PermissionRepository, Depends(get_permission_repo)],
) -> PermissionService:
    """Permission catalog service (composition root)."""
    return PermissionService(
        permission_repo,
        description_template=get_settings().permission_description_template,
    )


def get_role_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    identity_resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
    role_repo: Annotated[RoleRepository, Depends(get_role_repo)],
    permission_service: Annotated[PermissionService, Depends(get_permission_service)],
    role_permission_repo: Annotated[
        RolePermissionRepository, Depends(get_role_permission_repo)
    ],
) -> RoleService:
    """Role service for create-with-permissions (composition root)."""
    return RoleService(
        identity_resolver=identity_resolver,
        role_repo=role_repo,
        permission_service=permission_service,
        role_permission_repo=role_permission_repo,
        unit_of_work=db,
    )
