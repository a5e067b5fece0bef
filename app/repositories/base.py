"""
Base repository with generic CRUD operations.

All entity-specific repositories inherit from this.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import BaseModel

# Generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=BaseModel)

# ON CONFLICT DO NOTHING inserts per backend; keys match SUPPORTED_BACKENDS
CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class UserRepository(BaseRepository[User]):
            def __init__(self):
                super().__init__(User)
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_id(
        self,
        db: AsyncSession,
        id: int,
    ) -> Optional[ModelType]:
        """Get a single record by ID."""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_many(
        self,
        db: AsyncSession,
    ) -> List[ModelType]:
        """All records in id order."""
        result = await db.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def create(
        self,
        db: AsyncSession,
        **kwargs: Any,
    ) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def insert_ignore(
        self,
        db: AsyncSession,
        *,
        conflict_columns: List[str],
        **values: Any,
    ) -> None:
        """
        INSERT ... ON CONFLICT DO NOTHING.

        The unique constraint over conflict_columns decides whether the row is
        written, so concurrent callers never see a uniqueness error.
        """
        insert = CONFLICT_INSERTS[db.get_bind().dialect.name]

        stmt = (
            insert(self.model)
            .values(**values)
            .on_conflict_do_nothing(index_elements=conflict_columns)
        )
        await db.execute(stmt)

    async def update(
        self,
        db: AsyncSession,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """Update an existing record."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        await db.flush()
        await db.refresh(instance)
        return instance
