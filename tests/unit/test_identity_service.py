"""IdentityResolver unit tests with a mocked user repository."""

from unittest.mock import AsyncMock

import pytest

from access_control.application.dtos.user import UserIdentity, UserResult
from access_control.application.services.identity_service import IdentityResolver
from access_control.domain.exceptions import AuthenticationException
from access_control.shared.context import ActorContext
from access_control.shared.enums import ActorType


def _user(is_active: bool = True) -> UserResult:
    return UserResult(id="u1", username="alice", email="a@x.io", is_active=is_active)


async def test_resolves_active_user() -> None:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=_user())
    identity = await IdentityResolver(repo).resolve(ActorContext("u1", ActorType.USER))
    assert identity == UserIdentity(id="u1")
    repo.get_by_id.assert_awaited_once_with("u1")


@pytest.mark.parametrize(
    "context",
    [
        ActorContext(None, ActorType.USER),
        ActorContext("u1", ActorType.SYSTEM),
    ],
)
async def test_rejects_context_without_user(context: ActorContext) -> None:
    """No lookup happens when the context carries no user actor."""
    repo = AsyncMock()
    with pytest.raises(AuthenticationException):
        await IdentityResolver(repo).resolve(context)
    repo.get_by_id.assert_not_awaited()


@pytest.mark.parametrize("found", [None, _user(is_active=False)])
async def test_rejects_unknown_or_inactive_user(found: UserResult | None) -> None:
    repo = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=found)
    with pytest.raises(AuthenticationException):
        await IdentityResolver(repo).resolve(ActorContext("u1", ActorType.USER))
