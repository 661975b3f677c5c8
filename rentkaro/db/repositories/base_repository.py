"""
Base repository: generic async CRUD shared by every table.
Keeps queries in one place and lets services be tested against a real session.
"""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rentkaro.db.base import MAX_ID, Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        """Fetch single entity by primary key. Ids outside the key range match nothing."""
        if not 1 <= id <= MAX_ID:
            return None
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def list_newest(self, *criteria) -> list[ModelType]:
        """All rows matching `criteria`, newest first. Id breaks same-second ties."""
        stmt = select(self.model).where(*criteria).order_by(
            self.model.created_at.desc(), self.model.id.desc()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(entity)
        return entity

    async def save(self, entity: ModelType) -> ModelType:
        """Flush pending attribute changes and reload server-side defaults."""
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Remove entity from DB."""
        await self.session.delete(entity)
        await self.session.flush()

    async def commit(self) -> None:
        """Commit now, for work that must only follow a durable write."""
        await self.session.commit()
