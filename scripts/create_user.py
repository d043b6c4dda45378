"""Create a local user and print a bearer token for it.

Usage:
    python -m scripts.create_user <username> [email]
If email is omitted, <username>@example.local is used. Run migrations (or set
DATABASE_AUTO_CREATE=true and start the app once) before using this.
"""

import asyncio
import sys

from access_control.infrastructure.persistence.database import session_scope
from access_control.infrastructure.persistence.repositories import UserRepository
from access_control.infrastructure.security.jwt import issue_token
from access_control.shared.telemetry.logging import get_logger, setup_logging

logger = get_logger(__name__)


async def main() -> None:
    """Create the user in its own transaction, then issue a token."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.create_user <username> [email]", file=sys.stderr)
        sys.exit(1)
    username = sys.argv[1]
    email = sys.argv[2] if len(sys.argv) > 2 else f"{username}@example.local"

    setup_logging()
    async with session_scope() as session:
        user = await UserRepository(session).create_user(username=username, email=email)
    logger.info("Created user %s (%s)", user.id, username)

    print(f"User id: {user.id}")
    print(f"Token:   {issue_token(user.id)}")


if __name__ == "__main__":
    asyncio.run(main())
