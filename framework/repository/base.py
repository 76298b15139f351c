"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; a store keyed by integer id."""

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, or None when absent."""
        pass

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities in the store's natural order."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Create entity."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update entity."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Delete entity; False when there was nothing to delete."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses can add custom queries."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_all(self) -> List[T]:
        """Get all entities, ordered by primary key."""
        statement = select(self.model).order_by(self.model.id)
        result = await self.session.exec(statement)
        return list(result.all())

    async def create(self, entity: T) -> T:
        """Create entity."""
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Update entity (SQLModel tracks changes)."""
        self.session.add(entity)
        return entity

    async def delete(self, id: int) -> bool:
        """Delete entity."""
        entity = await self.get_by_id(id)
        if entity:
            await self.session.delete(entity)
            return True
        return False
