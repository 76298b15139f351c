"""
Repository pattern: the persistence gateway behind the domain services.
Each entity gets a BaseRepository subclass; UnitOfWork shares one session between them.
"""

from .base import BaseRepository, IRepository
from .unit_of_work import UnitOfWork

__all__ = ["BaseRepository", "IRepository", "UnitOfWork"]
