"""
Course repository - data access for Course and CourseSkill entities.
"""
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.course import Course
from app.models.course_skill import CourseSkill
from app.models.skill import Skill
from app.models.user import User
from app.repositories.base import BaseRepository


class CourseRepository(BaseRepository[Course]):
    def __init__(self):
        super().__init__(Course)

    async def list_with_instructor(
        self,
        db: AsyncSession,
    ) -> List[Row]:
        """Courses joined with their instructor's email."""
        result = await db.execute(
            select(
                Course.id,
                Course.title,
                Course.instructor_id,
                User.email.label("instructor"),
            )
            .join(User, User.id == Course.instructor_id)
            .order_by(Course.id)
        )
        return list(result.all())

    async def get_instructor_id(
        self,
        db: AsyncSession,
        course_id: int,
    ) -> Optional[int]:
        """The owning instructor's id, or None if the course does not exist."""
        result = await db.execute(
            select(Course.instructor_id).where(Course.id == course_id)
        )
        return result.scalar_one_or_none()

    async def list_skills(
        self,
        db: AsyncSession,
        course_id: int,
    ) -> List[Row]:
        """Skill tags of a course with skill names."""
        result = await db.execute(
            select(
                CourseSkill.id,
                Skill.id.label("skill_id"),
                Skill.name,
            )
            .join(Skill, Skill.id == CourseSkill.skill_id)
            .where(CourseSkill.course_id == course_id)
            .order_by(CourseSkill.id)
        )
        return list(result.all())

    async def add_skill(
        self,
        db: AsyncSession,
        course_id: int,
        skill_id: int,
    ) -> CourseSkill:
        """Tag a course with a skill. Raises IntegrityError on a duplicate pair."""
        course_skill = CourseSkill(course_id=course_id, skill_id=skill_id)
        db.add(course_skill)
        await db.flush()
        await db.refresh(course_skill)
        return course_skill

    async def remove_skill(
        self,
        db: AsyncSession,
        course_id: int,
        skill_id: int,
    ) -> int:
        """Remove a skill tag. Returns count deleted."""
        result = await db.execute(
            delete(CourseSkill).where(
                CourseSkill.course_id == course_id,
                CourseSkill.skill_id == skill_id,
            )
        )
        return result.rowcount
