"""
Session request and skill request schemas.
"""
from app.schemas.base import BaseSchema, IDSchema


class SessionRequestCreate(BaseSchema):
    """Ask for a session of a course."""

    course_id: int


class SessionRequestResponse(IDSchema):
    user_id: int
    course_id: int
    status: str


class StudentSessionItem(IDSchema):
    """A student's own request, with the course title."""

    title: str
    status: str


class InstructorRequestItem(IDSchema):
    """A request on one of the instructor's courses."""

    student: str
    title: str
    status: str


class SkillRequestCreate(BaseSchema):
    """Ask a mentor for help with a skill."""

    mentor_id: int
    skill_id: int


class SkillRequestResponse(IDSchema):
    learner_id: int
    mentor_id: int
    skill_id: int
    status: str


class SkillRequestReceivedItem(IDSchema):
    learner: str
    skill: str
    status: str


class SkillRequestSentItem(IDSchema):
    mentor: str
    skill: str
    status: str
