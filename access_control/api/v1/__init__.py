"""API v1."""

from access_control.api.v1.router import api_router

__all__ = ["api_router"]
