"""
Request repositories - data access for SessionRequest and SkillRequest.

Both request kinds share the status update; the listing joins differ.
"""
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.models.course import Course
from app.models.session_request import SessionRequest
from app.models.skill import Skill
from app.models.skill_request import SkillRequest
from app.models.user import User
from app.repositories.base import BaseRepository, ModelType


class _RequestRepository(BaseRepository[ModelType]):
    """Status mutation common to both request tables."""

    async def set_status(
        self,
        db: AsyncSession,
        request_id: int,
        status: str,
    ) -> int:
        """Overwrite a request's status. Returns count updated."""
        result = await db.execute(
            update(self.model)
            .where(self.model.id == request_id)
            .values(status=status)
        )
        await db.flush()
        return result.rowcount


class SessionRequestRepository(_RequestRepository[SessionRequest]):
    def __init__(self):
        super().__init__(SessionRequest)

    async def list_for_student(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> List[Row]:
        """A student's requests with course titles."""
        result = await db.execute(
            select(
                SessionRequest.id,
                Course.title,
                SessionRequest.status,
            )
            .join(Course, Course.id == SessionRequest.course_id)
            .where(SessionRequest.user_id == user_id)
            .order_by(SessionRequest.id)
        )
        return list(result.all())

    async def list_for_instructor(
        self,
        db: AsyncSession,
        instructor_id: int,
    ) -> List[Row]:
        """Requests on the instructor's courses with student emails."""
        result = await db.execute(
            select(
                SessionRequest.id,
                User.email.label("student"),
                Course.title,
                SessionRequest.status,
            )
            .join(User, User.id == SessionRequest.user_id)
            .join(Course, Course.id == SessionRequest.course_id)
            .where(Course.instructor_id == instructor_id)
            .order_by(SessionRequest.id)
        )
        return list(result.all())

    async def get_course_owner(
        self,
        db: AsyncSession,
        request_id: int,
    ) -> Optional[Row]:
        """
        (request id, owning instructor id) for a request.

        None if the request does not exist. The instructor id is None when
        the request points at a course that no longer exists.
        """
        result = await db.execute(
            select(
                SessionRequest.id,
                Course.instructor_id,
            )
            .outerjoin(Course, Course.id == SessionRequest.course_id)
            .where(SessionRequest.id == request_id)
        )
        return result.one_or_none()


class SkillRequestRepository(_RequestRepository[SkillRequest]):
    def __init__(self):
        super().__init__(SkillRequest)

    async def list_received(
        self,
        db: AsyncSession,
        mentor_id: int,
    ) -> List[Row]:
        """Requests addressed to a mentor, grouped by status, newest first."""
        learner = aliased(User)
        result = await db.execute(
            select(
                SkillRequest.id,
                learner.email.label("learner"),
                Skill.name.label("skill"),
                SkillRequest.status,
            )
            .join(learner, learner.id == SkillRequest.learner_id)
            .join(Skill, Skill.id == SkillRequest.skill_id)
            .where(SkillRequest.mentor_id == mentor_id)
            .order_by(SkillRequest.status, SkillRequest.id.desc())
        )
        return list(result.all())

    async def list_sent(
        self,
        db: AsyncSession,
        learner_id: int,
    ) -> List[Row]:
        """Requests a learner has sent, grouped by status, newest first."""
        mentor = aliased(User)
        result = await db.execute(
            select(
                SkillRequest.id,
                mentor.email.label("mentor"),
                Skill.name.label("skill"),
                SkillRequest.status,
            )
            .join(mentor, mentor.id == SkillRequest.mentor_id)
            .join(Skill, Skill.id == SkillRequest.skill_id)
            .where(SkillRequest.learner_id == learner_id)
            .order_by(SkillRequest.status, SkillRequest.id.desc())
        )
        return list(result.all())
