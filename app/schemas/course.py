"""
Course schemas.
"""
from pydantic import Field
from app.schemas.base import BaseSchema, IDSchema


class CourseCreate(BaseSchema):
    """Course creation body."""

    title: str = Field(..., min_length=1, max_length=255)


class CourseResponse(IDSchema):
    """Course with its instructor's email."""

    title: str
    instructor_id: int
    instructor: str


class CourseSkillCreate(BaseSchema):
    """Tag a course with an existing skill."""

    skill_id: int


class CourseSkillResponse(IDSchema):
    """A course's skill tag."""

    skill_id: int
    name: str
