"""DTOs for user use cases (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get_by_id, create_user). No credentials."""

    id: str
    username: str
    email: str
    is_active: bool


@dataclass(frozen=True)
class UserIdentity:
    """Resolved acting user; the creator reference stamped on new records."""

    id: str
