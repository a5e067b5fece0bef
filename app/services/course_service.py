"""
Course service - course listing and creation.
"""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.repositories.course_repository import CourseRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import CurrentActor
from app.schemas.course import CourseResponse
from app.services.guards import require_instructor

logger = get_logger(__name__)


class CourseService:
    """Handles course listing and creation."""

    def __init__(self):
        self.course_repo = CourseRepository()
        self.user_repo = UserRepository()

    async def list_courses(self, db: AsyncSession) -> List[CourseResponse]:
        """All courses with their instructor's email. Public."""
        rows = await self.course_repo.list_with_instructor(db)
        return [CourseResponse.model_validate(row) for row in rows]

    async def create_course(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        title: str,
    ) -> CourseResponse:
        """
        Create a course owned by the calling instructor.

        Raises:
            ForbiddenException: If the caller is not an instructor.
        """
        actor = require_instructor(actor)

        course = await self.course_repo.create(db, title=title, instructor_id=actor.user_id)
        instructor = await self.user_repo.get_by_id(db, actor.user_id)
        await db.commit()

        logger.info("course_created", course_id=course.id, instructor_id=actor.user_id)
        return CourseResponse(
            id=course.id,
            title=course.title,
            instructor_id=course.instructor_id,
            instructor=instructor.email,
        )
