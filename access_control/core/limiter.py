"""SlowAPI limiter for role and catalog writes.

main attaches it as app.state.limiter; write endpoints are decorated with
limit_writes. The limit string comes from settings on each request, so
importing a route module never loads Settings.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from access_control.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def write_rate_limit() -> str:
    """Current per-client limit for write endpoints, e.g. ``120/minute``."""
    return get_settings().write_rate_limit


limit_writes = limiter.limit(write_rate_limit)
