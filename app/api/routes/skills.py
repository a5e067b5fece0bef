"""
Skill routes - the skill catalog, the caller's declared skills, and the
public browse view.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.api.deps import get_optional_actor
from app.schemas.auth import CurrentActor
from app.schemas.base import DeletedResponse, UpdatedResponse
from app.schemas.skill import (
    BrowseSkillItem,
    SkillCreate,
    SkillResponse,
    UserSkillCreate,
    UserSkillResponse,
    UserSkillUpdate,
)
from app.services.skill_service import SkillService

router = APIRouter(tags=["skills"])

skill_service = SkillService()


@router.get("/skills", response_model=List[SkillResponse])
async def list_skills(db: AsyncSession = Depends(get_db)):
    """The whole skill vocabulary."""
    return await skill_service.list_skills(db)


@router.post("/skills", response_model=SkillResponse)
async def ensure_skill(
    data: SkillCreate,
    db: AsyncSession = Depends(get_db),
):
    """Return the skill with this exact name, creating it if needed."""
    return await skill_service.ensure_skill(db, data.name)


@router.get("/user-skills", response_model=List[UserSkillResponse])
async def list_user_skills(
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Skills the caller has declared."""
    return await skill_service.list_user_skills(db, actor)


@router.post("/user-skills", response_model=UserSkillResponse)
async def add_user_skill(
    data: UserSkillCreate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Declare a skill the caller can teach."""
    return await skill_service.add_user_skill(
        db,
        actor,
        name=data.name,
        level=data.level,
        description=data.description,
    )


@router.put("/user-skills/{user_skill_id}", response_model=UpdatedResponse)
async def update_user_skill(
    user_skill_id: int,
    data: UserSkillUpdate,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Change the level and/or description of one of the caller's skills."""
    return await skill_service.update_user_skill(
        db,
        actor,
        user_skill_id,
        level=data.level,
        description=data.description,
    )


@router.delete("/user-skills/{user_skill_id}", response_model=DeletedResponse)
async def delete_user_skill(
    user_skill_id: int,
    actor: Optional[CurrentActor] = Depends(get_optional_actor),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the caller's skills."""
    return await skill_service.delete_user_skill(db, actor, user_skill_id)


@router.get("/browse-skills", response_model=List[BrowseSkillItem])
async def browse_skills(db: AsyncSession = Depends(get_db)):
    """Every user's declared skills, by skill name then email."""
    return await skill_service.browse(db)
