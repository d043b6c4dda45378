"""Permission catalog service: resolve a canonical code to its single catalog entry."""

from __future__ import annotations

from access_control.application.dtos.permission import PermissionResult
from access_control.application.interfaces.repositories import IPermissionRepository
from access_control.domain.exceptions import ValidationException
from access_control.domain.value_objects import PermissionCode

DEFAULT_DESCRIPTION_TEMPLATE = "Auto-generated permission for {code}"


class PermissionService:
    """Get-or-create catalog entries. Existing entries are never modified."""

    def __init__(
        self,
        permission_repo: IPermissionRepository,
        description_template: str = DEFAULT_DESCRIPTION_TEMPLATE,
    ) -> None:
        self._repo = permission_repo
        self._description_template = description_template

    async def resolve(self, code: str, created_by: str | None) -> PermissionResult:
        """Return the catalog entry for code, creating it on first reference.

        Concurrent callers for the same code all receive the same entry; the
        repository performs an atomic insert-if-absent.

        Raises:
            ValidationException: If code is not a valid ``module:action`` identifier.
            PersistenceException: On storage failure other than the duplicate race.
        """
        try:
            parsed = PermissionCode(code)
        except ValueError as e:
            raise ValidationException(str(e), field="permission_code") from e
        module, action = parsed.split()
        return await self._repo.get_or_create(
            code=parsed.value,
            module=module,
            action=action,
            description=self._description_template.format(code=parsed.value),
            created_by=created_by,
        )
