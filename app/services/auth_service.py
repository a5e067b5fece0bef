"""
Authentication service - handles registration, login, and token resolution.

Password hashing is bcrypt and deliberately slow, so it always runs in a
worker thread rather than on the event loop.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import (
    create_access_token,
    decode_token,
    hash_password_async,
    verify_password_async,
    verify_token_type,
)
from app.core.exceptions import (
    InvalidCredentialsException,
    EmailAlreadyExistsException,
)
from app.models.user import User, ROLE_USER
from app.repositories.user_repository import UserRepository
from app.schemas.auth import CurrentActor, RegisterResponse, TokenResponse
from app.schemas.user import UserResponse

logger = get_logger(__name__)


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
        role: str = ROLE_USER,
    ) -> RegisterResponse:
        """
        Register a new user. The client is sent to the login page afterwards.

        Raises:
            EmailAlreadyExistsException: If email is already registered.
        """
        if await self.user_repo.email_exists(db, email):
            raise EmailAlreadyExistsException()

        password_hash = await hash_password_async(password)
        try:
            user = await self.user_repo.create(
                db,
                email=email,
                password_hash=password_hash,
                role=role,
            )
        except IntegrityError:
            # Lost a race with a concurrent registration of the same email
            await db.rollback()
            raise EmailAlreadyExistsException()
        await db.commit()

        logger.info("user_registered", user_id=user.id, role=user.role)
        return RegisterResponse(
            user=UserResponse.model_validate(user),
            redirect_to=settings.login_page,
        )

    async def login(
        self,
        db: AsyncSession,
        *,
        email: str,
        password: str,
    ) -> TokenResponse:
        """
        Authenticate user and return a token plus their landing page.

        Raises:
            InvalidCredentialsException: If email/password is wrong.
        """
        user = await self.user_repo.get_by_email(db, email)

        if not user or not await verify_password_async(password, user.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsException()

        logger.info("user_logged_in", user_id=user.id)
        return self._generate_token(user)

    async def resolve_actor(
        self,
        db: AsyncSession,
        token: str,
    ) -> Optional[CurrentActor]:
        """
        Turn an access token into the caller's identity.

        None for malformed, expired or foreign tokens, and for users that no
        longer exist. The role is read from the database, not the token.
        """
        payload = decode_token(token)
        if not payload or not verify_token_type(payload, "access"):
            return None

        subject = payload.get("sub")
        if not subject or not str(subject).isdigit():
            return None

        user = await self.user_repo.get_by_id(db, int(subject))
        if not user:
            return None

        return CurrentActor(user_id=user.id, role=user.role)

    def _generate_token(self, user: User) -> TokenResponse:
        """Generate an access token and pick the role's landing page."""
        access_token = create_access_token({"sub": str(user.id), "role": user.role})

        return TokenResponse(
            access_token=access_token,
            expires_in=settings.access_token_expire_minutes * 60,
            role=user.role,
            redirect_to=(
                settings.instructor_home_page
                if user.is_instructor
                else settings.student_home_page
            ),
        )
