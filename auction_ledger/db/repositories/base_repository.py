"""
Base repository - generic keyed access over one ORM model (SOLID: Dependency Inversion).
Challenge: Consistent data access, testability via an injected session.
"""

from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from auction_ledger.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id) -> ModelType | None:
        """Fetch single entity by primary key (identity map first, then DB)."""
        return await self.session.get(self.model, id)

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()  # Surface constraint errors now, commit later
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Remove entity from DB."""
        await self.session.delete(entity)
        await self.session.flush()
