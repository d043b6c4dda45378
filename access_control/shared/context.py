"""Request context management using contextvars.

Provides async-safe storage for request-scoped data such as the current
user. The identity resolver reads a snapshot (ActorContext) rather than
the contextvars directly, so services can be driven outside a request.

Usage:
    set_current_user(user_id="user123", actor_type=ActorType.USER)
    ctx = get_actor_context()
"""

from contextvars import ContextVar
from dataclasses import dataclass

from access_control.shared.enums import ActorType

_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)
_current_actor_type: ContextVar[ActorType] = ContextVar(
    "current_actor_type", default=ActorType.SYSTEM
)
_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


@dataclass(frozen=True)
class ActorContext:
    """Immutable snapshot of the current actor context."""

    user_id: str | None
    actor_type: ActorType
    request_id: str | None = None


def set_current_user(
    user_id: str | None,
    actor_type: ActorType = ActorType.USER,
    request_id: str | None = None,
) -> None:
    """Set the current user context for this request.

    Call in a dependency after authentication. Context is scoped to the
    current async task.

    Args:
        user_id: Authenticated user ID or None.
        actor_type: Who is performing the action (USER, SYSTEM).
        request_id: Optional request ID for log correlation.

    Raises:
        ValueError: If actor_type is USER and user_id is None or empty.
    """
    if actor_type == ActorType.USER and not user_id:
        raise ValueError("user_id is required when actor_type is USER")
    _current_user_id.set(user_id)
    _current_actor_type.set(actor_type)
    _current_request_id.set(request_id)


def clear_current_user() -> None:
    """Clear the current user context."""
    _current_user_id.set(None)
    _current_actor_type.set(ActorType.SYSTEM)
    _current_request_id.set(None)


def get_actor_context() -> ActorContext:
    """Return a snapshot of the current actor context."""
    return ActorContext(
        user_id=_current_user_id.get(),
        actor_type=_current_actor_type.get(),
        request_id=_current_request_id.get(),
    )
