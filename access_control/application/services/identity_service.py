"""Identity resolution: turn a request's actor context into the acting user."""

from __future__ import annotations

import logging

from access_control.application.dtos.user import UserIdentity
from access_control.application.interfaces.repositories import IUserRepository
from access_control.domain.exceptions import AuthenticationException
from access_control.shared.context import ActorContext
from access_control.shared.enums import ActorType

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Resolve ActorContext to a UserIdentity backed by an active user record."""

    def __init__(self, user_repo: IUserRepository) -> None:
        self._user_repo = user_repo

    async def resolve(self, context: ActorContext) -> UserIdentity:
        """Return the acting user's identity.

        Raises:
            AuthenticationException: No user in context, non-user actor, or
                the user does not exist / is inactive.
        """
        if context.actor_type != ActorType.USER or not context.user_id:
            raise AuthenticationException("Not authenticated")
        user = await self._user_repo.get_by_id(context.user_id)
        if user is None or not user.is_active:
            logger.info("Identity resolution rejected user_id=%s", context.user_id)
            raise AuthenticationException("Not authenticated")
        return UserIdentity(id=user.id)
