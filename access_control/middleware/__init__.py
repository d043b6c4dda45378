"""ASGI middleware."""

from access_control.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
