"""
Identity guards shared by the services.

Every service call receives the caller as an explicit CurrentActor (or None
for anonymous callers); these helpers turn that into the right error.
"""
from typing import Optional

from app.core.exceptions import UnauthorizedException, ForbiddenException
from app.schemas.auth import CurrentActor


def require_actor(actor: Optional[CurrentActor]) -> CurrentActor:
    """Raises UnauthorizedException for anonymous callers."""
    if actor is None:
        raise UnauthorizedException("Authentication required")
    return actor


def require_instructor(actor: Optional[CurrentActor]) -> CurrentActor:
    """Raises UnauthorizedException or ForbiddenException unless the caller is an instructor."""
    actor = require_actor(actor)
    if not actor.is_instructor:
        raise ForbiddenException("Instructor access required")
    return actor
