"""
Course routes, including a course's skill tags.

Thin controllers - CourseService and SkillService hold the rules.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.api.deps import get_optional_actor
from app.schemas.auth import CurrentActor
from app.schemas.base import DeletedResponse
from app.schemas.course import (
    CourseCreate,
    CourseResponse,
    CourseSkillCreate,
    CourseSkillResponse,
)
from app.services.course_service import CourseService
from app.services.skill_service import SkillService

router = APIRouter(prefix="/courses", tags=["courses"])

course_service = CourseService()
skill_service = SkillService()


@router.get("", response_model=List[CourseResponse])
async def list_courses(db: AsyncSession = Depends(get_db)):
    """List all courses with their instructor. Public."""
    return await course_service.list_courses(db)


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
async def create_course(
    data: CourseCreate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Create a course owned by the calling instructor."""
    return await course_service.create_course(db, actor, data.title)


# ── Skills ────────────────────────────────────────────────────────────────────

@router.get("/{course_id}/skills", response_model=List[CourseSkillResponse])
async def list_course_skills(
    course_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Skills a course teaches. Public."""
    return await skill_service.list_course_skills(db, course_id)


@router.post("/{course_id}/skills", response_model=CourseSkillResponse)
async def add_course_skill(
    course_id: int,
    data: CourseSkillCreate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Tag a course with a skill. Course instructor only."""
    return await skill_service.add_course_skill(db, actor, course_id, data.skill_id)


@router.delete("/{course_id}/skills/{skill_id}", response_model=DeletedResponse)
async def remove_course_skill(
    course_id: int,
    skill_id: int,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Remove a skill tag from a course. Course instructor only."""
    return await skill_service.remove_course_skill(db, actor, course_id, skill_id)
