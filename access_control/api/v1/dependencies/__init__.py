"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, the authenticated actor and
application services. Routes depend only on these, not on infra directly.
"""

from access_control.api.v1.dependencies.user_rbac import (
    get_current_user,
    get_identity_resolver,
    get_permission_repo,
    get_permission_service,
    get_request_context,
    get_role_permission_repo,
    get_role_repo,
    get_role_service,
    get_user_repo,
)
from access_control.infrastructure.persistence.database import get_db

__all__ = [
    "get_current_user",
    "get_db",
    "get_identity_resolver",
    "get_permission_repo",
    "get_permission_service",
    "get_request_context",
    "get_role_permission_repo",
    "get_role_repo",
    "get_role_service",
    "get_user_repo",
]
