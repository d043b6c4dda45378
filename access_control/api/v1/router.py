"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from access_control.api.v1.dependencies.
"""

from fastapi import APIRouter

from access_control.api.v1.endpoints import health, permissions, roles

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(
    permissions.router, prefix="/permissions", tags=["permissions"]
)
