"""
Rate limiting configuration using slowapi.

In-memory storage by default; point RATE_LIMIT_STORAGE_URI at Redis to share
limits across workers.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from app.core.config import settings


def _get_user_or_ip(request: Request) -> str:
    """
    Rate-limit key: authenticated user ID if available, otherwise client IP.

    Login and register are unauthenticated, so they are limited per IP.
    """
    actor = getattr(request.state, "current_actor", None)
    if actor is not None:
        return str(actor.user_id)
    return get_remote_address(request)


limiter = Limiter(
    key_func=_get_user_or_ip,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

# Pre-defined rate limit strings for use in route decorators:
#   @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"           # login, register - brute-force protection
