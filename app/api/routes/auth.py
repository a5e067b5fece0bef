"""
Authentication routes.

Thin controllers - AuthService owns registration and credential checks.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.rate_limit import limiter, RATE_AUTH
from app.api.deps import form_or_json, get_optional_actor, is_form_post
from app.schemas.auth import (
    CurrentActor,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.schemas.base import MessageResponse
from app.schemas.user import UserResponse
from app.services.auth_service import AuthService
from app.services.user_service import UserService

router = APIRouter(tags=["auth"])

auth_service = AuthService()
user_service = UserService()


def _set_session_cookie(response: Response, token: TokenResponse) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token.access_token,
        max_age=token.expires_in,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_AUTH)
async def register(
    request: Request,
    data: RegisterRequest = Depends(form_or_json(RegisterRequest)),
    db: AsyncSession = Depends(get_db),
):
    """
    Register a new user as a student (default) or an instructor.

    JSON clients get the user and the login page in redirect_to; HTML form
    posts are redirected straight to the login page.
    """
    result = await auth_service.register(
        db,
        email=data.email,
        password=data.password,
        role=data.role,
    )
    if is_form_post(request):
        return RedirectResponse(result.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    return result


@router.post("/login", response_model=TokenResponse)
@limiter.limit(RATE_AUTH)
async def login(
    request: Request,
    response: Response,
    data: LoginRequest = Depends(form_or_json(LoginRequest)),
    db: AsyncSession = Depends(get_db),
):
    """
    Login with email and password.

    Returns the access token and also stores it in an HTTP-only session
    cookie. HTML form posts are redirected to the role's landing page.
    """
    token = await auth_service.login(db, email=data.email, password=data.password)
    if is_form_post(request):
        redirect = RedirectResponse(token.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
        _set_session_cookie(redirect, token)
        return redirect

    _set_session_cookie(response, token)
    return token


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """
    Logout current user.

    Clears the session cookie; bearer tokens are discarded client-side.
    """
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=Optional[UserResponse])
async def me(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Current session user, or null when not logged in."""
    return await user_service.get_current(db, actor)
