"""Permission API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PermissionGrantRequest(BaseModel):
    """One menu node of a permission tree: action flags plus optional sub-menus.

    Accepts camelCase (menuName, subMenus) or snake_case field names.
    """

    model_config = ConfigDict(populate_by_name=True)

    menu_name: str | None = Field(default=None, alias="menuName", max_length=100)
    actions: dict[str, bool | None] | None = None
    sub_menus: list["PermissionGrantRequest"] = Field(
        default_factory=list, alias="subMenus", max_length=100
    )


class PermissionResponse(BaseModel):
    """Permission catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    module: str
    action: str
    description: str | None
    created_by: str | None
