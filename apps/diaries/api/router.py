from fastapi import APIRouter, Depends, status
from typing import List
from framework.dependencies import get_uow
from framework.repository.unit_of_work import UnitOfWork
from framework.response import NOT_FOUND_RESPONSE, BAD_INPUT_RESPONSE
from ..schemas import DiaryCreate, DiaryResponse
from ..service import DiaryService

router = APIRouter()

def get_diary_service(uow: UnitOfWork = Depends(get_uow)) -> DiaryService:
    """Dependency: create DiaryService."""
    return DiaryService(uow)

@router.get("", response_model=List[DiaryResponse])
async def list_diaries(service: DiaryService = Depends(get_diary_service)):
    """List all diaries."""
    diaries = await service.get_diaries()
    return [DiaryResponse.model_validate(diary) for diary in diaries]

@router.get("/{diary_id}", response_model=DiaryResponse, responses=NOT_FOUND_RESPONSE)
async def get_diary(
    diary_id: int,
    service: DiaryService = Depends(get_diary_service)
):
    diary = await service.get_diary(diary_id)
    return DiaryResponse.model_validate(diary)

@router.post(
    "",
    response_model=DiaryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_INPUT_RESPONSE
)
async def create_diary(
    data: DiaryCreate,
    service: DiaryService = Depends(get_diary_service)
):
    """Create a diary; the title must not be blank."""
    diary = await service.create_diary(data)
    return DiaryResponse.model_validate(diary)

@router.delete("/{diary_id}", response_model=DiaryResponse, responses=NOT_FOUND_RESPONSE)
async def delete_diary(
    diary_id: int,
    service: DiaryService = Depends(get_diary_service)
):
    diary = await service.delete_diary(diary_id)
    return DiaryResponse.model_validate(diary)
