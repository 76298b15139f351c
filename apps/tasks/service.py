from typing import List, Optional
from framework.logging.logger import get_logger
from framework.exceptions.handler import NotFoundException
from framework.repository.unit_of_work import UnitOfWork
from framework.validation import require_not_blank
from .models import Task
from .repository import TaskRepository
from .schemas import TaskCreate, TaskUpdate, TaskResult

logger = get_logger("task_service")


class TaskNotFoundException(NotFoundException):
    def __init__(self, id: int):
        super().__init__("Task", id)


class TaskService:
    """Task service (CRUD keyed by task id).

    Tasks are not scoped to the diary in the route: listing returns every
    task and lookups ignore ``diary_id``.
    """

    def __init__(self, uow: UnitOfWork):
        """Initialize TaskService with UnitOfWork."""
        self.uow = uow

    @property
    def repository(self) -> TaskRepository:
        return self.uow.get_repository(TaskRepository)

    async def get_tasks(self) -> List[Task]:
        return await self.repository.get_all()

    async def get_task(self, task_id: int) -> Task:
        """Return the task with the given id or raise TaskNotFoundException."""
        task = await self.repository.get_by_id(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundException(task_id)
        return task

    async def create_task(self, data: TaskCreate, diary_id: Optional[int] = None) -> TaskResult:
        """Persist a new task and return its summary."""
        require_not_blank("title", data.title)

        task = Task(title=data.title, diary_id=diary_id)
        async with self.uow:
            await self.repository.create(task)

        logger.info(f"Task {task.id} created under diary {diary_id}")
        return TaskResult.model_validate(task)

    async def update_task(self, task_id: int, data: TaskUpdate) -> TaskResult:
        """Replace the title of an existing task."""
        require_not_blank("title", data.title)
        task = await self.get_task(task_id)

        task.title = data.title
        async with self.uow:
            await self.repository.update(task)

        logger.info(f"Task {task_id} updated")
        return TaskResult.model_validate(task)

    async def delete_task(self, task_id: int) -> TaskResult:
        """Remove an existing task and return the summary it had."""
        task = await self.get_task(task_id)
        result = TaskResult.model_validate(task)
        async with self.uow:
            await self.repository.delete(task_id)

        logger.info(f"Task {task_id} deleted")
        return result
