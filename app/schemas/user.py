"""
User schemas.
"""
from app.schemas.base import BaseSchema, IDSchema


class UserResponse(IDSchema):
    """Public view of a user."""

    email: str
    role: str
