"""
Authentication schemas.
"""
from typing import Literal
from pydantic import ConfigDict, EmailStr, Field
from app.schemas.base import BaseSchema
from app.schemas.user import UserResponse
from app.models.user import ROLE_INSTRUCTOR


class LoginRequest(BaseSchema):
    """Login request body."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseSchema):
    """Registration request body. Role defaults to a plain student account."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    role: Literal["user", "instructor"] = "user"


class RegisterResponse(BaseSchema):
    """Created user plus the page the client should go to next."""

    user: UserResponse
    redirect_to: str


class TokenResponse(BaseSchema):
    """Token response after successful authentication."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    role: str
    redirect_to: str


class CurrentActor(BaseSchema):
    """
    The authenticated caller of one request.

    Passed explicitly into every service call that needs an identity.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int
    role: Literal["user", "instructor"]

    @property
    def is_instructor(self) -> bool:
        return self.role == ROLE_INSTRUCTOR
