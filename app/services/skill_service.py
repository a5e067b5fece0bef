"""
Skill service - the shared skill vocabulary and the two tag associations
built on it: skills users offer (user_skills) and skills courses teach
(course_skills).

Business rules
──────────────
• Skill names are matched exactly; get-or-create never duplicates a name
• User skills are owned by their creator; other users' rows are invisible
  (update answers not-found, delete answers zero rows)
• Course skills are edited only by the course's instructor
"""
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    ConflictException,
    ForbiddenException,
    NotFoundException,
    UserSkillNotFoundException,
)
from app.core.logging import get_logger
from app.repositories.course_repository import CourseRepository
from app.repositories.skill_repository import SkillRepository, UserSkillRepository
from app.schemas.auth import CurrentActor
from app.schemas.base import DeletedResponse, UpdatedResponse
from app.schemas.course import CourseSkillResponse
from app.schemas.skill import (
    BrowseSkillItem,
    SkillResponse,
    UserSkillResponse,
)
from app.services.guards import require_actor

logger = get_logger(__name__)


class SkillService:
    """Handles the skill catalog, user skills and course skill tags."""

    def __init__(self):
        self.skill_repo = SkillRepository()
        self.user_skill_repo = UserSkillRepository()
        self.course_repo = CourseRepository()

    # ── Catalog ─────────────────────────────────────────────────────────────

    async def list_skills(self, db: AsyncSession) -> List[SkillResponse]:
        skills = await self.skill_repo.get_many(db)
        return [SkillResponse.model_validate(skill) for skill in skills]

    async def ensure_skill(
        self,
        db: AsyncSession,
        name: str,
    ) -> SkillResponse:
        """Get-or-create a skill by exact name. Idempotent."""
        skill = await self.skill_repo.ensure(db, name)
        await db.commit()
        return SkillResponse.model_validate(skill)

    # ── User skills ─────────────────────────────────────────────────────────

    async def list_user_skills(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> List[UserSkillResponse]:
        actor = require_actor(actor)
        rows = await self.user_skill_repo.list_for_user(db, actor.user_id)
        return [UserSkillResponse.model_validate(row) for row in rows]

    async def add_user_skill(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        *,
        name: str,
        level: str,
        description: str = "",
    ) -> UserSkillResponse:
        """
        Declare a skill the caller can teach.

        Always inserts a new row; declaring the same skill twice gives two rows.
        """
        actor = require_actor(actor)

        skill = await self.skill_repo.ensure(db, name)
        user_skill = await self.user_skill_repo.create(
            db,
            user_id=actor.user_id,
            skill_id=skill.id,
            level=level,
            description=description or "",
        )
        await db.commit()

        logger.info(
            "user_skill_added",
            user_skill_id=user_skill.id,
            user_id=actor.user_id,
            skill=name,
        )
        return UserSkillResponse(
            id=user_skill.id,
            name=skill.name,
            level=user_skill.level,
            description=user_skill.description,
        )

    async def update_user_skill(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        user_skill_id: int,
        *,
        level: Optional[str] = None,
        description: Optional[str] = None,
    ) -> UpdatedResponse:
        """
        Partially update one of the caller's skills.

        Raises:
            UserSkillNotFoundException: If the row is missing or not the caller's.
        """
        actor = require_actor(actor)

        user_skill = await self.user_skill_repo.get_owned(db, user_skill_id, actor.user_id)
        if user_skill is None:
            raise UserSkillNotFoundException()

        updates = {}
        if level is not None:
            updates["level"] = level
        if description is not None:
            updates["description"] = description

        await self.user_skill_repo.update(db, user_skill, **updates)
        await db.commit()
        return UpdatedResponse(updated=1)

    async def delete_user_skill(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        user_skill_id: int,
    ) -> DeletedResponse:
        """Delete one of the caller's skills; other ids delete nothing."""
        actor = require_actor(actor)
        deleted = await self.user_skill_repo.delete_owned(db, user_skill_id, actor.user_id)
        await db.commit()
        return DeletedResponse(deleted=deleted)

    async def browse(self, db: AsyncSession) -> List[BrowseSkillItem]:
        """Every user's declared skills, for finding a mentor."""
        rows = await self.user_skill_repo.browse(db)
        return [BrowseSkillItem.model_validate(row) for row in rows]

    # ── Course skills ───────────────────────────────────────────────────────

    async def list_course_skills(
        self,
        db: AsyncSession,
        course_id: int,
    ) -> List[CourseSkillResponse]:
        rows = await self.course_repo.list_skills(db, course_id)
        return [CourseSkillResponse.model_validate(row) for row in rows]

    async def add_course_skill(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        course_id: int,
        skill_id: int,
    ) -> CourseSkillResponse:
        """
        Tag a course with a skill.

        Raises:
            ForbiddenException: If the caller does not own the course.
            NotFoundException: If the skill does not exist.
            ConflictException: If the course already has this skill.
        """
        actor = require_actor(actor)
        await self._require_course_owner(db, actor, course_id)

        skill = await self.skill_repo.get_by_id(db, skill_id)
        if skill is None:
            raise NotFoundException("Skill not found", code="SKILL_NOT_FOUND")
        skill_name = skill.name

        try:
            course_skill = await self.course_repo.add_skill(db, course_id, skill_id)
        except IntegrityError:
            await db.rollback()
            raise ConflictException("Course already has this skill", code="COURSE_SKILL_EXISTS")

        await db.commit()

        logger.info("course_skill_added", course_id=course_id, skill_id=skill_id)
        return CourseSkillResponse(
            id=course_skill.id,
            skill_id=skill_id,
            name=skill_name,
        )

    async def remove_course_skill(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        course_id: int,
        skill_id: int,
    ) -> DeletedResponse:
        """Remove a skill tag from a course. Removing an absent tag deletes nothing."""
        actor = require_actor(actor)
        await self._require_course_owner(db, actor, course_id)

        deleted = await self.course_repo.remove_skill(db, course_id, skill_id)
        await db.commit()
        return DeletedResponse(deleted=deleted)

    async def _require_course_owner(
        self,
        db: AsyncSession,
        actor: CurrentActor,
        course_id: int,
    ) -> None:
        """A missing course is reported the same way as someone else's course."""
        instructor_id = await self.course_repo.get_instructor_id(db, course_id)
        if instructor_id is None or instructor_id != actor.user_id:
            raise ForbiddenException("Only the course instructor may edit its skills")
