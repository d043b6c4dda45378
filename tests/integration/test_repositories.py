"""Repository integration tests against in-memory SQLite (fresh schema per test)."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from access_control.application.dtos.permission import PermissionGrant
from access_control.application.dtos.role_permission import (
    LinkAlreadyExists,
    LinkCreated,
    LinkFailed,
    LinkOutcome,
)
from access_control.application.dtos.user import UserResult
from access_control.application.services.identity_service import IdentityResolver
from access_control.application.services.permission_service import PermissionService
from access_control.application.services.role_service import RoleService
from access_control.domain.exceptions import (
    DuplicateRoleCodeException,
    LinkingFailedException,
)
from access_control.infrastructure.persistence.models import Permission, RolePermission
from access_control.infrastructure.persistence.repositories import (
    PermissionRepository,
    RolePermissionRepository,
    RoleRepository,
    UserRepository,
)
from access_control.shared.context import ActorContext
from access_control.shared.enums import ActorType

pytestmark = pytest.mark.requires_db

TREE = [
    PermissionGrant(
        menu_name="Users",
        actions={"create": True, "read": True, "delete": True},
        sub_menus=(
            PermissionGrant(
                menu_name="Profiles", actions={"read": True, "edit": True, "export": True}
            ),
        ),
    )
]


async def _count(session: AsyncSession, model: type) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


def _role_service(session: AsyncSession, link_repo=None) -> RoleService:
    return RoleService(
        identity_resolver=IdentityResolver(UserRepository(session)),
        role_repo=RoleRepository(session),
        permission_service=PermissionService(PermissionRepository(session)),
        role_permission_repo=link_repo or RolePermissionRepository(session),
        unit_of_work=session,
    )


class FailingOnNthLink(RolePermissionRepository):
    """Real link repository that reports LinkFailed on the nth call."""

    def __init__(self, db: AsyncSession, fail_on: int) -> None:
        super().__init__(db)
        self.fail_on = fail_on
        self.calls = 0

    async def link_permission_to_role(
        self, role_id: str, permission_id: str, created_by: str | None
    ) -> LinkOutcome:
        self.calls += 1
        if self.calls == self.fail_on:
            return LinkFailed(role_id, permission_id, "simulated storage failure")
        return await super().link_permission_to_role(role_id, permission_id, created_by)


async def test_get_or_create_is_idempotent(db_session: AsyncSession) -> None:
    """Second call returns the same entry and leaves its description untouched."""
    repo = PermissionRepository(db_session)
    first = await repo.get_or_create(
        code="users:read",
        module="users",
        action="read",
        description="first description",
        created_by=None,
    )
    second = await repo.get_or_create(
        code="users:read",
        module="users",
        action="read",
        description="second description",
        created_by=None,
    )
    assert second == first
    assert second.description == "first description"
    assert await _count(db_session, Permission) == 1


async def test_get_or_create_returns_entry_created_by_another_writer(
    db_session: AsyncSession,
) -> None:
    """An entry inserted elsewhere first is returned as-is instead of raising."""
    db_session.add(
        Permission(code="reports:export", module="reports", action="export", description="manual")
    )
    await db_session.flush()

    found = await PermissionRepository(db_session).get_or_create(
        code="reports:export",
        module="reports",
        action="export",
        description="Auto-generated permission for reports:export",
        created_by=None,
    )
    assert found.description == "manual"
    assert await _count(db_session, Permission) == 1


async def test_list_permissions_filters_by_module(db_session: AsyncSession) -> None:
    service = PermissionService(PermissionRepository(db_session))
    for code in ("users:read", "users:create", "reports:list"):
        await service.resolve(code, None)
    repo = PermissionRepository(db_session)
    users = await repo.list_permissions(module="Users")
    assert [p.code for p in users] == ["users:create", "users:read"]
    assert len(await repo.list_permissions()) == 3
    assert len(await repo.list_permissions(skip=1, limit=1)) == 1


async def test_link_outcomes(db_session: AsyncSession, user: UserResult) -> None:
    """New pair is created; same pair again is LinkAlreadyExists; session stays usable."""
    role = await RoleRepository(db_session).create_role(
        code="viewer", name="Viewer", requested_permissions=[], created_by=user.id
    )
    perm = await PermissionService(PermissionRepository(db_session)).resolve(
        "users:read", user.id
    )
    links = RolePermissionRepository(db_session)

    created = await links.link_permission_to_role(role.id, perm.id, user.id)
    again = await links.link_permission_to_role(role.id, perm.id, user.id)

    assert isinstance(created, LinkCreated)
    assert created.link.created_by == user.id
    assert again == LinkAlreadyExists(role.id, perm.id)
    assert await links.get_permission_codes_for_role(role.id) == ["users:read"]
    assert await _count(db_session, RolePermission) == 1


async def test_link_to_missing_permission_fails(
    db_session: AsyncSession, user: UserResult
) -> None:
    """A foreign-key violation is LinkFailed, not a duplicate."""
    role = await RoleRepository(db_session).create_role(
        code="viewer", name="Viewer", requested_permissions=[], created_by=user.id
    )
    outcome = await RolePermissionRepository(db_session).link_permission_to_role(
        role.id, "no-such-permission", user.id
    )
    assert isinstance(outcome, LinkFailed)
    assert outcome.permission_id == "no-such-permission"
    assert await _count(db_session, RolePermission) == 0


async def test_duplicate_role_code(db_session: AsyncSession, user: UserResult) -> None:
    repo = RoleRepository(db_session)
    await repo.create_role(
        code="admin", name="Administrator", requested_permissions=[], created_by=user.id
    )
    with pytest.raises(DuplicateRoleCodeException):
        await repo.create_role(
            code="admin", name="Other", requested_permissions=[], created_by=user.id
        )


async def test_create_role_end_to_end(db_session: AsyncSession, user: UserResult) -> None:
    """Role row holds the raw snapshot; six catalog entries and six links exist."""
    context = ActorContext(user.id, ActorType.USER)
    role = await _role_service(db_session).create_role(
        "admin", "Administrator", TREE, context
    )

    stored = await RoleRepository(db_session).get_by_id(role.id)
    assert stored is not None
    assert stored.created_by == user.id
    assert stored.requested_permissions == [TREE[0].to_snapshot()]
    codes = await RolePermissionRepository(db_session).get_permission_codes_for_role(role.id)
    assert codes == sorted(
        [
            "users:create",
            "users:read",
            "users:delete",
            "profiles:read",
            "profiles:edit",
            "profiles:export",
        ]
    )
    created = await PermissionRepository(db_session).get_by_code("profiles:export")
    assert created is not None
    assert created.description == "Auto-generated permission for profiles:export"
    assert created.created_by == user.id


async def test_roles_share_catalog_entries(
    db_session: AsyncSession, user: UserResult
) -> None:
    """Two roles requesting users:read produce one catalog entry and two links."""
    context = ActorContext(user.id, ActorType.USER)
    tree = [PermissionGrant(menu_name="Users", actions={"read": True})]
    service = _role_service(db_session)
    first = await service.create_role("a", "A", tree, context)
    second = await service.create_role("b", "B", tree, context)

    assert await _count(db_session, Permission) == 1
    assert await _count(db_session, RolePermission) == 2
    links = RolePermissionRepository(db_session)
    assert await links.get_permission_codes_for_role(first.id) == ["users:read"]
    assert await links.get_permission_codes_for_role(second.id) == ["users:read"]


async def test_partial_failure_keeps_completed_work(
    db_session: AsyncSession, user: UserResult
) -> None:
    """Failure on the 3rd code leaves the role and two links committed."""
    context = ActorContext(user.id, ActorType.USER)
    link_repo = FailingOnNthLink(db_session, fail_on=3)

    with pytest.raises(LinkingFailedException) as exc_info:
        await _role_service(db_session, link_repo).create_role(
            "admin", "Administrator", TREE, context
        )
    await db_session.rollback()

    assert exc_info.value.processed_count == 2
    stored = await RoleRepository(db_session).get_by_code("admin")
    assert stored is not None
    codes = await RolePermissionRepository(db_session).get_permission_codes_for_role(
        stored.id
    )
    assert codes == ["users:create", "users:read"]
    # users:delete reached the catalog before its link failed
    assert await _count(db_session, Permission) == 3
    assert await _count(db_session, RolePermission) == 2
    assert link_repo.calls == 3


async def test_users_and_permissions_menu_example(
    db_session: AsyncSession, user: UserResult
) -> None:
    tree = [
        PermissionGrant(
            menu_name="Users",
            actions={"create": True, "read": True, "edit": True, "delete": True},
            sub_menus=(
                PermissionGrant(
                    menu_name="Permissions", actions={"read": True, "edit": True}
                ),
            ),
        )
    ]
    role = await _role_service(db_session).create_role(
        "ops", "Operations", tree, ActorContext(user.id, ActorType.USER)
    )
    codes = await RolePermissionRepository(db_session).get_permission_codes_for_role(role.id)
    assert set(codes) == {
        "users:create",
        "users:read",
        "users:edit",
        "users:delete",
        "permissions:read",
        "permissions:edit",
    }
    assert await _count(db_session, RolePermission) == 6


async def test_empty_tree_creates_no_catalog_entries(
    db_session: AsyncSession, user: UserResult
) -> None:
    role = await _role_service(db_session).create_role(
        "empty", "Empty", [], ActorContext(user.id, ActorType.USER)
    )
    assert role.requested_permissions == []
    assert await _count(db_session, Permission) == 0
    assert await _count(db_session, RolePermission) == 0
