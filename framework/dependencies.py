"""
Shared FastAPI dependencies: one database session and UnitOfWork per request.
"""

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.repository.unit_of_work import UnitOfWork


async def get_db():
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.mysql.get_session():
        yield session


def get_uow(
    db: AsyncSession = Depends(get_db)
) -> UnitOfWork:
    """Dependency: create UnitOfWork."""
    return UnitOfWork(session=db)
