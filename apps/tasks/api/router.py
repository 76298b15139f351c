from fastapi import APIRouter, Depends, status
from typing import List
from framework.dependencies import get_uow
from framework.repository.unit_of_work import UnitOfWork
from framework.response import NOT_FOUND_RESPONSE, BAD_INPUT_RESPONSE
from ..schemas import TaskCreate, TaskUpdate, TaskResult
from ..service import TaskService

# Mounted under /diaries/{diary_id}/tasks; diary_id is accepted on every route
# but only recorded on create.
router = APIRouter()

def get_task_service(uow: UnitOfWork = Depends(get_uow)) -> TaskService:
    """Dependency: create TaskService."""
    return TaskService(uow)

@router.get("", response_model=List[TaskResult])
async def list_tasks(
    diary_id: int,
    service: TaskService = Depends(get_task_service)
):
    """List all tasks."""
    tasks = await service.get_tasks()
    return [TaskResult.model_validate(task) for task in tasks]

@router.get("/{task_id}", response_model=TaskResult, responses=NOT_FOUND_RESPONSE)
async def get_task(
    diary_id: int,
    task_id: int,
    service: TaskService = Depends(get_task_service)
):
    task = await service.get_task(task_id)
    return TaskResult.model_validate(task)

@router.post(
    "",
    response_model=TaskResult,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_INPUT_RESPONSE
)
async def create_task(
    diary_id: int,
    data: TaskCreate,
    service: TaskService = Depends(get_task_service)
):
    return await service.create_task(data, diary_id=diary_id)

@router.patch(
    "/{task_id}",
    response_model=TaskResult,
    responses={**NOT_FOUND_RESPONSE, **BAD_INPUT_RESPONSE}
)
async def update_task(
    diary_id: int,
    task_id: int,
    data: TaskUpdate,
    service: TaskService = Depends(get_task_service)
):
    """Replace the task's title."""
    return await service.update_task(task_id, data)

@router.delete("/{task_id}", response_model=TaskResult, responses=NOT_FOUND_RESPONSE)
async def delete_task(
    diary_id: int,
    task_id: int,
    service: TaskService = Depends(get_task_service)
):
    return await service.delete_task(task_id)
