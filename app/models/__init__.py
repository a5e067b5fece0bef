"""
Database models for SkillHub.

All models use integer primary keys and include created_at/updated_at timestamps.
"""
from app.models.base import BaseModel, TimestampMixin, IntegerIDMixin
from app.models.user import User
from app.models.course import Course
from app.models.skill import Skill
from app.models.user_skill import UserSkill
from app.models.course_skill import CourseSkill
from app.models.session_request import SessionRequest
from app.models.skill_request import SkillRequest

__all__ = [
    "BaseModel",
    "TimestampMixin",
    "IntegerIDMixin",
    "User",
    "Course",
    "Skill",
    "UserSkill",
    "CourseSkill",
    "SessionRequest",
    "SkillRequest",
]
