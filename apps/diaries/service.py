from typing import List
from framework.logging.logger import get_logger
from framework.exceptions.handler import NotFoundException
from framework.repository.unit_of_work import UnitOfWork
from framework.validation import require_not_blank
from .models import Diary
from .repository import DiaryRepository
from .schemas import DiaryCreate

logger = get_logger("diary_service")


class DiaryNotFoundException(NotFoundException):
    def __init__(self, id: int):
        super().__init__("Diary", id)


class DiaryService:
    """Diary service: existence checks and create/delete orchestration."""

    def __init__(self, uow: UnitOfWork):
        """Initialize Diary Service with UnitOfWork."""
        self.uow = uow

    @property
    def repository(self) -> DiaryRepository:
        return self.uow.get_repository(DiaryRepository)

    async def get_diaries(self) -> List[Diary]:
        """Return every stored diary."""
        return await self.repository.get_all()

    async def get_diary(self, diary_id: int) -> Diary:
        """Return the diary with the given id or raise DiaryNotFoundException."""
        diary = await self.repository.get_by_id(diary_id)
        if diary is None:
            logger.warning(f"Diary {diary_id} not found")
            raise DiaryNotFoundException(diary_id)
        return diary

    async def create_diary(self, data: DiaryCreate) -> Diary:
        require_not_blank("title", data.title)

        diary = Diary(title=data.title, comment=data.comment or "")
        async with self.uow:
            await self.repository.create(diary)

        logger.info(f"Diary {diary.id} created")
        return diary

    async def delete_diary(self, diary_id: int) -> Diary:
        diary = await self.get_diary(diary_id)
        async with self.uow:
            await self.repository.delete(diary_id)

        logger.info(f"Diary {diary_id} deleted")
        return diary
