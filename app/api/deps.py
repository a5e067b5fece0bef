"""
API dependencies for dependency injection.
"""
from typing import Optional, Type

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.schemas.auth import CurrentActor
from app.schemas.base import BaseSchema
from app.services.auth_service import AuthService


# Security scheme
security = HTTPBearer(auto_error=False)

auth_service = AuthService()


async def get_optional_actor(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db),
) -> Optional[CurrentActor]:
    """
    Get the caller's identity if authenticated, None otherwise.

    The access token is taken from the Authorization header, falling back to
    the session cookie set at login. Services decide what an anonymous caller
    may do.
    """
    if credentials:
        token = credentials.credentials
    else:
        token = request.cookies.get(settings.session_cookie_name)

    if not token:
        return None

    actor = await auth_service.resolve_actor(db, token)
    # Read by the rate limiter key function
    request.state.current_actor = actor
    return actor


_FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def is_form_post(request: Request) -> bool:
    """True when the body was sent by an HTML form rather than as JSON."""
    return request.headers.get("content-type", "").startswith(_FORM_CONTENT_TYPES)


def form_or_json(schema: Type[BaseSchema]):
    """
    Build a dependency that validates the body as `schema`, whether it was
    posted as JSON or as an HTML form.

    Validation failures surface as the usual 422 response.
    """

    async def _parse_body(request: Request) -> BaseSchema:
        try:
            if is_form_post(request):
                data = dict(await request.form())
            else:
                data = await request.json()
        except ValueError:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": "Malformed request body", "input": None}]
            )

        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False))

    return _parse_body
