"""Request ID middleware.

Forwards a client X-Request-ID or mints one, exposes it on request.state and
echoes it on the response. Client values are validated before they reach
logs. Raw ASGI so streaming responses are untouched.
"""

import re
import uuid
from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]
Send = Callable[[Message], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client value when safe to log, else a fresh UUID4 hex string."""
    candidate = (raw or "").strip()
    if (
        not candidate
        or len(candidate) > REQUEST_ID_MAX_LENGTH
        or not _REQUEST_ID_PATTERN.match(candidate)
    ):
        return uuid.uuid4().hex
    return candidate


class RequestIDMiddleware:
    """Attach a request id to every HTTP request and response."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode("latin-1")

    def _incoming(self, scope: Scope) -> str | None:
        for key, value in scope.get("headers", []):
            if key.lower() == self._header_key:
                return value.decode("latin-1")
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = sanitize_request_id(self._incoming(scope))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (self._header_key, request_id.encode("latin-1")),
                ]
            await send(message)

        await self.app(scope, receive, send_with_request_id)
