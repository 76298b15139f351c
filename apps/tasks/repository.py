"""Task module repository implementation."""

from framework.repository import BaseRepository
from .models import Task


class TaskRepository(BaseRepository[Task]):
    """Task repository."""

    def __init__(self, session):
        super().__init__(session, Task)
