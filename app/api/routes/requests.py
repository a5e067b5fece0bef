"""
Request workflow routes - course session requests and skill mentoring
requests.

Thin controllers - RequestWorkflowService owns every transition rule.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.api.deps import get_optional_actor
from app.schemas.auth import CurrentActor
from app.schemas.base import UpdatedResponse
from app.schemas.request import (
    InstructorRequestItem,
    SessionRequestCreate,
    SessionRequestResponse,
    SkillRequestCreate,
    SkillRequestReceivedItem,
    SkillRequestResponse,
    SkillRequestSentItem,
    StudentSessionItem,
)
from app.services.request_workflow import RequestWorkflowService

router = APIRouter(tags=["requests"])

workflow_service = RequestWorkflowService()


# ── Session requests ─────────────────────────────────────────────────────────

@router.post("/request", response_model=SessionRequestResponse)
async def create_session_request(
    data: SessionRequestCreate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Request a session of a course."""
    return await workflow_service.create_session_request(db, actor, data.course_id)


@router.get("/student-sessions", response_model=List[StudentSessionItem])
async def list_student_sessions(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """The caller's session requests."""
    return await workflow_service.list_for_student(db, actor)


@router.get("/requests", response_model=List[InstructorRequestItem])
async def list_instructor_requests(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Session requests on the calling instructor's courses."""
    return await workflow_service.list_for_instructor(db, actor)


@router.post("/requests/{request_id}/{status}", response_model=UpdatedResponse)
async def set_session_request_status(
    request_id: int,
    status: str,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Accept or reject a session request. Course instructor only."""
    return await workflow_service.set_session_request_status(db, actor, request_id, status)


# ── Skill requests ───────────────────────────────────────────────────────────

@router.post("/skill-request", response_model=SkillRequestResponse)
async def create_skill_request(
    data: SkillRequestCreate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Ask another user to mentor you on a skill."""
    return await workflow_service.create_skill_request(
        db, actor, data.mentor_id, data.skill_id
    )


@router.get("/skill-requests-received", response_model=List[SkillRequestReceivedItem])
async def list_received_skill_requests(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Mentoring requests addressed to the caller."""
    return await workflow_service.list_received(db, actor)


@router.get("/skill-requests-sent", response_model=List[SkillRequestSentItem])
async def list_sent_skill_requests(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Mentoring requests the caller has sent."""
    return await workflow_service.list_sent(db, actor)


@router.post("/skill-requests/{request_id}/{status}", response_model=UpdatedResponse)
async def set_skill_request_status(
    request_id: int,
    status: str,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Accept or reject a mentoring request. Mentor only."""
    return await workflow_service.set_skill_request_status(db, actor, request_id, status)
