"""
Skill repository - data access for Skill and UserSkill entities.
"""
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.skill import Skill
from app.models.user import User
from app.models.user_skill import UserSkill
from app.repositories.base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    def __init__(self):
        super().__init__(Skill)

    async def get_by_name(
        self,
        db: AsyncSession,
        name: str,
    ) -> Optional[Skill]:
        """Find a skill by its exact name."""
        result = await db.execute(
            select(Skill).where(Skill.name == name)
        )
        return result.scalar_one_or_none()

    async def ensure(
        self,
        db: AsyncSession,
        name: str,
    ) -> Skill:
        """
        Get-or-create a skill by exact name.

        Insert-ignore then select: the unique index on skills.name arbitrates
        between concurrent callers, and both end up with the same row.
        """
        await self.insert_ignore(db, conflict_columns=["name"], name=name)
        return await self.get_by_name(db, name)


class UserSkillRepository(BaseRepository[UserSkill]):
    def __init__(self):
        super().__init__(UserSkill)

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> List[Row]:
        """A user's declared skills with skill names."""
        result = await db.execute(
            select(
                UserSkill.id,
                Skill.name,
                UserSkill.level,
                UserSkill.description,
            )
            .join(Skill, Skill.id == UserSkill.skill_id)
            .where(UserSkill.user_id == user_id)
            .order_by(UserSkill.id)
        )
        return list(result.all())

    async def get_owned(
        self,
        db: AsyncSession,
        user_skill_id: int,
        user_id: int,
    ) -> Optional[UserSkill]:
        """A user skill, only if it belongs to user_id."""
        result = await db.execute(
            select(UserSkill).where(
                UserSkill.id == user_skill_id,
                UserSkill.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def delete_owned(
        self,
        db: AsyncSession,
        user_skill_id: int,
        user_id: int,
    ) -> int:
        """Delete a user skill scoped to its owner. Returns count deleted."""
        result = await db.execute(
            delete(UserSkill).where(
                UserSkill.id == user_skill_id,
                UserSkill.user_id == user_id,
            )
        )
        return result.rowcount

    async def browse(
        self,
        db: AsyncSession,
    ) -> List[Row]:
        """Every declared skill with its owner, by skill name then owner email."""
        result = await db.execute(
            select(
                UserSkill.id,
                User.id.label("user_id"),
                User.email,
                Skill.name,
                UserSkill.level,
                UserSkill.description,
            )
            .join(User, User.id == UserSkill.user_id)
            .join(Skill, Skill.id == UserSkill.skill_id)
            .order_by(Skill.name, User.email)
        )
        return list(result.all())
