"""Role API schemas."""

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    model_validator,
)

from access_control.application.dtos.permission import PermissionGrant
from access_control.schemas.permission import PermissionGrantRequest


class RoleCreateRequest(BaseModel):
    """Request body for creating a role with its permission tree."""

    code: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    permissions: list[PermissionGrantRequest] = Field(default_factory=list, max_length=100)

    _submitted: list[Any] = PrivateAttr(default_factory=list)

    @model_validator(mode="wrap")
    @classmethod
    def _keep_submitted_tree(
        cls, data: Any, handler: ModelWrapValidatorHandler["RoleCreateRequest"]
    ) -> "RoleCreateRequest":
        """Validate as usual, keeping the permission nodes exactly as sent."""
        model = handler(data)
        if isinstance(data, Mapping):
            model._submitted = copy.deepcopy(list(data.get("permissions") or []))
        return model

    def to_grants(self) -> list[PermissionGrant]:
        """Convert the tree to application DTOs; each keeps its node as submitted."""
        grants: list[PermissionGrant] = []
        for index, parsed in enumerate(self.permissions):
            raw = self._submitted[index] if index < len(self._submitted) else None
            if not isinstance(raw, Mapping):
                raw = parsed.model_dump(by_alias=True, exclude_unset=True)
            grants.append(PermissionGrant.from_dict(raw))
        return grants


class RoleResponse(BaseModel):
    """Role create/detail response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    name: str
    requested_permissions: list[dict[str, Any]]
    created_by: str | None


class RoleDetailResponse(RoleResponse):
    """Role with the canonical codes actually linked to it."""

    permission_codes: list[str] = Field(default_factory=list)
