"""DTOs for permission use cases (no dependency on ORM)."""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PermissionResult:
    """Permission catalog read-model (result of get_by_code, get_or_create)."""

    id: str
    code: str
    module: str
    action: str
    description: str | None
    created_by: str | None = None


@dataclass(frozen=True)
class PermissionGrant:
    """One node of a requested permission tree: a menu, its action flags, its sub-menus.

    menu_name or actions may be missing; such a node grants nothing but is
    kept in the role's snapshot as requested. ``source`` is the node as it
    was submitted, when the grant was built from one.
    """

    menu_name: str | None = None
    actions: Mapping[str, bool | None] | None = None
    sub_menus: tuple["PermissionGrant", ...] = field(default_factory=tuple)
    source: Mapping[str, Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PermissionGrant":
        """Build from a camelCase or snake_case mapping, keeping the mapping as source."""
        subs = data.get("subMenus", data.get("sub_menus")) or ()
        actions = data.get("actions")
        return cls(
            menu_name=data.get("menuName", data.get("menu_name")),
            actions=dict(actions) if actions is not None else None,
            sub_menus=tuple(cls.from_dict(s) for s in subs),
            source=copy.deepcopy(dict(data)),
        )

    def to_snapshot(self) -> dict[str, Any]:
        """Return the node for the role's requested-permissions snapshot.

        The submitted mapping is returned unchanged (extra keys, key style and
        omitted sub-menus included). Grants built in code serialize as camelCase.
        """
        if self.source is not None:
            return copy.deepcopy(dict(self.source))
        return {
            "menuName": self.menu_name,
            "actions": dict(self.actions) if self.actions is not None else None,
            "subMenus": [sub.to_snapshot() for sub in self.sub_menus],
        }
