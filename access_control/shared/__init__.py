"""Shared utilities: request context, enums, logging, and ID generation.

Used by domain, application, and infrastructure. No business logic.
"""

from access_control.shared.context import (
    ActorContext,
    clear_current_user,
    get_actor_context,
    set_current_user,
)
from access_control.shared.enums import ActorType
from access_control.shared.utils import generate_cuid

__all__ = [
    "set_current_user",
    "clear_current_user",
    "get_actor_context",
    "ActorContext",
    "ActorType",
    "generate_cuid",
]
