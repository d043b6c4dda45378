"""Bearer tokens naming the acting user.

The identity system issues tokens in production; this service only checks
the signature and expiry and reads the user id from ``sub``. issue_token is
used by the local setup script and by tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from access_control.core.config import get_settings


def _signing_key() -> str:
    return get_settings().secret_key.get_secret_value()


def issue_token(user_id: str, ttl: timedelta | None = None, **claims: Any) -> str:
    """Sign a token whose subject is ``user_id``.

    ttl defaults to access_token_expire_minutes. Extra keyword claims are
    copied into the payload as-is.
    """
    settings = get_settings()
    lifetime = ttl if ttl is not None else timedelta(
        minutes=settings.access_token_expire_minutes
    )
    payload = {**claims, "sub": user_id, "exp": datetime.now(UTC) + lifetime}
    return cast(str, jwt.encode(payload, _signing_key(), algorithm=settings.algorithm))


def verify_token(token: str) -> dict[str, Any]:
    """Return the claims of a valid token.

    Raises:
        ValueError: Bad signature, expired, or no usable ``sub``/``exp``.
    """
    try:
        claims = jwt.decode(
            token,
            _signing_key(),
            algorithms=[get_settings().algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not claims.get("sub"):
        raise ValueError("Token names no user (empty sub)")
    return claims


def token_subject(token: str) -> str:
    """User id carried by a valid token."""
    return str(verify_token(token)["sub"])
