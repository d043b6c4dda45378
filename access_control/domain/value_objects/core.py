"""Domain value objects for access control.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import ClassVar

from access_control.domain.enums import PermissionAction


@dataclass(frozen=True)
class PermissionCode:
    """Canonical permission identifier ``<module>:<action>`` (SRP).

    Module is lower-cased on construction via ``for_grant``; action must be
    one of PermissionAction. One catalog entry exists per code system-wide.
    """

    SEPARATOR: ClassVar[str] = ":"

    value: str

    def __post_init__(self) -> None:
        if not self.value or self.SEPARATOR not in self.value:
            raise ValueError(
                f"Permission code must be '<module>{self.SEPARATOR}<action>', got {self.value!r}"
            )
        module, action = self.split()
        if not module:
            raise ValueError("Permission code module must be non-empty")
        if action not in PermissionAction.values():
            raise ValueError(
                f"Permission code action must be one of {PermissionAction.values()}, got {action!r}"
            )

    @classmethod
    def for_grant(cls, module: str, action: PermissionAction) -> "PermissionCode":
        """Build the code for a menu label and action (module lower-cased)."""
        return cls(f"{module.lower()}{cls.SEPARATOR}{action.value}")

    def split(self) -> tuple[str, str]:
        """Return (module, action). Splits on the last separator."""
        module, _, action = self.value.rpartition(self.SEPARATOR)
        return module, action

    @property
    def module(self) -> str:
        return self.split()[0]

    @property
    def action(self) -> str:
        return self.split()[1]

    def __str__(self) -> str:
        return self.value
