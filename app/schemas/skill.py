"""
Skill and user skill schemas.
"""
from typing import Literal, Optional
from pydantic import Field
from app.schemas.base import BaseSchema, IDSchema

SkillLevel = Literal["Beginner", "Intermediate", "Advanced"]


class SkillCreate(BaseSchema):
    """Skill get-or-create body. The name is stored exactly as given."""

    name: str = Field(..., min_length=1, max_length=100)


class SkillResponse(IDSchema):
    name: str


class UserSkillCreate(BaseSchema):
    """Declare a teachable skill."""

    name: str = Field(..., min_length=1, max_length=100)
    level: SkillLevel
    description: str = ""


class UserSkillUpdate(BaseSchema):
    """Partial update; omitted fields keep their value."""

    level: Optional[SkillLevel] = None
    description: Optional[str] = None


class UserSkillResponse(IDSchema):
    name: str
    level: str
    description: str


class BrowseSkillItem(IDSchema):
    """A declared skill together with the user offering it."""

    user_id: int
    email: str
    name: str
    level: str
    description: str
