"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL/ORM logic
out of the service and route layers.
"""
from app.repositories.base import BaseRepository
from app.repositories.user_repository import UserRepository
from app.repositories.course_repository import CourseRepository
from app.repositories.skill_repository import SkillRepository, UserSkillRepository
from app.repositories.request_repository import (
    SessionRequestRepository,
    SkillRequestRepository,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CourseRepository",
    "SkillRepository",
    "UserSkillRepository",
    "SessionRequestRepository",
    "SkillRequestRepository",
]
