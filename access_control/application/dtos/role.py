"""DTOs for role use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of create_role, get_by_id, get_by_code)."""

    id: str
    code: str
    name: str
    requested_permissions: list[dict[str, Any]] = field(default_factory=list)
    created_by: str | None = None
