"""
Request workflow service - the two request state machines.

Session requests (student → course instructor) and skill requests
(learner → mentor) share one lifecycle:

  pending → accepted
          → rejected

Business rules
──────────────
• Only accepted and rejected are settable; pending is the initial value only
• A transition is allowed only for the request's owner: the instructor of
  the course for session requests, the mentor for skill requests
• A learner may not ask themselves for mentoring
• At most one skill request per (learner, mentor, skill), whatever its status
• Students may file any number of session requests for the same course
"""
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    CourseNotFoundException,
    DuplicateRequestException,
    ForbiddenException,
    InvalidStatusException,
    NotFoundException,
    RequestNotFoundException,
    SelfRequestException,
)
from app.core.logging import get_logger
from app.models.request_status import SETTABLE_STATUSES, STATUS_PENDING
from app.repositories.course_repository import CourseRepository
from app.repositories.request_repository import (
    SessionRequestRepository,
    SkillRequestRepository,
)
from app.repositories.skill_repository import SkillRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import CurrentActor
from app.schemas.base import UpdatedResponse
from app.schemas.request import (
    InstructorRequestItem,
    SessionRequestResponse,
    SkillRequestReceivedItem,
    SkillRequestResponse,
    SkillRequestSentItem,
    StudentSessionItem,
)
from app.services.guards import require_actor

logger = get_logger(__name__)

# Request kinds understood by the transition routine
KIND_SESSION = "session_request"
KIND_SKILL = "skill_request"


class RequestWorkflowService:
    """Creates, lists and transitions session and skill requests."""

    def __init__(self):
        self.session_repo = SessionRequestRepository()
        self.skill_request_repo = SkillRequestRepository()
        self.course_repo = CourseRepository()
        self.skill_repo = SkillRepository()
        self.user_repo = UserRepository()

    # ── Session requests ────────────────────────────────────────────────────

    async def create_session_request(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        course_id: int,
    ) -> SessionRequestResponse:
        """
        File a pending session request for a course.

        Raises:
            UnauthorizedException: If nobody is logged in.
            CourseNotFoundException: If the course does not exist.
        """
        actor = require_actor(actor)

        if await self.course_repo.get_instructor_id(db, course_id) is None:
            raise CourseNotFoundException()

        request = await self.session_repo.create(
            db,
            user_id=actor.user_id,
            course_id=course_id,
            status=STATUS_PENDING,
        )
        await db.commit()

        logger.info(
            "session_request_created",
            request_id=request.id,
            course_id=course_id,
            student_id=actor.user_id,
        )
        return SessionRequestResponse.model_validate(request)

    async def list_for_student(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> List[StudentSessionItem]:
        """The caller's own session requests."""
        actor = require_actor(actor)
        rows = await self.session_repo.list_for_student(db, actor.user_id)
        return [StudentSessionItem.model_validate(row) for row in rows]

    async def list_for_instructor(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> List[InstructorRequestItem]:
        """
        Session requests on the caller's courses.

        Anonymous callers are refused the same way as students.

        Raises:
            ForbiddenException: If the caller is not a logged-in instructor.
        """
        if actor is None or not actor.is_instructor:
            raise ForbiddenException("Instructor access required")
        rows = await self.session_repo.list_for_instructor(db, actor.user_id)
        return [InstructorRequestItem.model_validate(row) for row in rows]

    async def set_session_request_status(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        request_id: int,
        status: str,
    ) -> UpdatedResponse:
        """Accept or reject a session request on one of the caller's courses."""
        return await self._transition(db, KIND_SESSION, actor, request_id, status)

    # ── Skill requests ──────────────────────────────────────────────────────

    async def create_skill_request(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        mentor_id: int,
        skill_id: int,
    ) -> SkillRequestResponse:
        """
        Ask a mentor for help with a skill.

        Raises:
            UnauthorizedException: If nobody is logged in.
            SelfRequestException: If the mentor is the caller.
            NotFoundException: If the mentor or the skill does not exist.
            DuplicateRequestException: If this triple was already requested.
        """
        actor = require_actor(actor)

        if mentor_id == actor.user_id:
            raise SelfRequestException()
        if await self.user_repo.get_by_id(db, mentor_id) is None:
            raise NotFoundException("Mentor not found", code="MENTOR_NOT_FOUND")
        if await self.skill_repo.get_by_id(db, skill_id) is None:
            raise NotFoundException("Skill not found", code="SKILL_NOT_FOUND")

        try:
            request = await self.skill_request_repo.create(
                db,
                learner_id=actor.user_id,
                mentor_id=mentor_id,
                skill_id=skill_id,
                status=STATUS_PENDING,
            )
        except IntegrityError:
            # uq_skill_request decides; the existing row may have any status
            await db.rollback()
            logger.info(
                "skill_request_duplicate",
                learner_id=actor.user_id,
                mentor_id=mentor_id,
                skill_id=skill_id,
            )
            raise DuplicateRequestException()

        await db.commit()

        logger.info(
            "skill_request_created",
            request_id=request.id,
            learner_id=actor.user_id,
            mentor_id=mentor_id,
            skill_id=skill_id,
        )
        return SkillRequestResponse.model_validate(request)

    async def list_received(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> List[SkillRequestReceivedItem]:
        """Skill requests addressed to the caller."""
        actor = require_actor(actor)
        rows = await self.skill_request_repo.list_received(db, actor.user_id)
        return [SkillRequestReceivedItem.model_validate(row) for row in rows]

    async def list_sent(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> List[SkillRequestSentItem]:
        """Skill requests the caller has sent."""
        actor = require_actor(actor)
        rows = await self.skill_request_repo.list_sent(db, actor.user_id)
        return [SkillRequestSentItem.model_validate(row) for row in rows]

    async def set_skill_request_status(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
        request_id: int,
        status: str,
    ) -> UpdatedResponse:
        """Accept or reject a skill request addressed to the caller."""
        return await self._transition(db, KIND_SKILL, actor, request_id, status)

    # ── Shared transition ───────────────────────────────────────────────────

    async def _transition(
        self,
        db: AsyncSession,
        kind: str,
        actor: Optional[CurrentActor],
        request_id: int,
        status: str,
    ) -> UpdatedResponse:
        """
        Move a request to accepted or rejected.

        Check order: authenticated → settable status → request exists →
        caller owns the request.
        """
        actor = require_actor(actor)

        if status not in SETTABLE_STATUSES:
            raise InvalidStatusException(status)

        owner_id = await self._owner_of(db, kind, request_id)
        if owner_id != actor.user_id:
            logger.warning(
                "request_transition_forbidden",
                kind=kind,
                request_id=request_id,
                actor_id=actor.user_id,
            )
            raise ForbiddenException("Only the request's owner may change its status")

        repo = self.session_repo if kind == KIND_SESSION else self.skill_request_repo
        updated = await repo.set_status(db, request_id, status)
        await db.commit()

        logger.info(
            "request_status_changed",
            kind=kind,
            request_id=request_id,
            status=status,
            actor_id=actor.user_id,
        )
        return UpdatedResponse(updated=updated)

    async def _owner_of(
        self,
        db: AsyncSession,
        kind: str,
        request_id: int,
    ) -> Optional[int]:
        """
        The user allowed to decide on a request.

        Session requests belong to the course's instructor, skill requests to
        the mentor. None when a session request's course has disappeared, so
        nobody owns it.

        Raises:
            RequestNotFoundException: If the request does not exist.
        """
        if kind == KIND_SESSION:
            row = await self.session_repo.get_course_owner(db, request_id)
            if row is None:
                raise RequestNotFoundException()
            return row.instructor_id

        request = await self.skill_request_repo.get_by_id(db, request_id)
        if request is None:
            raise RequestNotFoundException()
        return request.mentor_id
