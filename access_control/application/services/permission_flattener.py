"""Flatten a menu/sub-menu permission tree into canonical permission codes."""

from collections.abc import Iterable, Iterator

from access_control.application.dtos.permission import PermissionGrant
from access_control.domain.enums import PermissionAction
from access_control.domain.value_objects import PermissionCode


def _codes_for_node(grant: PermissionGrant) -> Iterator[str]:
    if not grant.menu_name or grant.actions is None:
        return
    for action in PermissionAction:
        if grant.actions.get(action.value):
            yield PermissionCode.for_grant(grant.menu_name, action).value


def flatten_permission_grants(grants: Iterable[PermissionGrant]) -> list[str]:
    """Return ``module:action`` codes for every truthy action in the tree.

    Per top-level node: its own actions first (canonical action order), then
    each direct sub-menu's actions. Sub-menus are not namespaced under their
    parent and deeper nesting is ignored. Duplicates are kept; the catalog
    and link uniqueness make them harmless.
    """
    codes: list[str] = []
    for grant in grants:
        codes.extend(_codes_for_node(grant))
        for sub in grant.sub_menus:
            codes.extend(_codes_for_node(sub))
    return codes
