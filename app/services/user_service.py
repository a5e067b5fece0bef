"""
User service - read access to user accounts.
"""
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.user_repository import UserRepository
from app.schemas.auth import CurrentActor
from app.schemas.user import UserResponse


class UserService:
    """Handles user listing and the current-user lookup."""

    def __init__(self):
        self.user_repo = UserRepository()

    async def list_users(self, db: AsyncSession) -> List[UserResponse]:
        users = await self.user_repo.list_all(db)
        return [UserResponse.model_validate(user) for user in users]

    async def get_current(
        self,
        db: AsyncSession,
        actor: Optional[CurrentActor],
    ) -> Optional[UserResponse]:
        """The logged-in user, or None for anonymous callers."""
        if actor is None:
            return None
        user = await self.user_repo.get_by_id(db, actor.user_id)
        if user is None:
            return None
        return UserResponse.model_validate(user)
