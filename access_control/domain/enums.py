"""Domain enumerations for access control.

Enums represent fixed sets of domain values (e.g. grantable actions).
"""

from enum import Enum


class PermissionAction(str, Enum):
    """Grantable action on a menu/module.

    Member order is the canonical emission order used when flattening a
    permission tree; do not reorder.
    """

    CREATE = "create"
    READ = "read"
    EDIT = "edit"
    DELETE = "delete"
    LIST = "list"
    EXPORT = "export"
    APPROVE = "approve"
    DOWNLOAD = "download"

    @classmethod
    def values(cls) -> list[str]:
        """Return all action values as strings, in canonical order.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [action.value for action in cls]
