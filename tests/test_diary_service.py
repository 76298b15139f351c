"""DiaryService test cases."""
import pytest
from unittest.mock import AsyncMock, MagicMock
from framework.exceptions.handler import BadInputException
from framework.repository.unit_of_work import UnitOfWork
from apps.diaries.models import Diary
from apps.diaries.schemas import DiaryCreate
from apps.diaries.service import DiaryService, DiaryNotFoundException

NOT_EXIST_ID = 100
ID = 1
TITLE = "Today's diary"
COMMENT = "It was a day to regret"


@pytest.fixture
def service(uow: UnitOfWork) -> DiaryService:
    return DiaryService(uow)


class TestGetDiaries:

    @pytest.mark.asyncio
    async def test_returns_empty_list(self, service: DiaryService):
        assert await service.get_diaries() == []

    @pytest.mark.asyncio
    async def test_returns_created_diary(self, service: DiaryService):
        created = await service.create_diary(DiaryCreate(title=TITLE, comment=COMMENT))

        diaries = await service.get_diaries()

        assert len(diaries) == 1
        assert diaries[0].id == created.id


class TestGetDiary:

    @pytest.mark.asyncio
    async def test_returns_diary(self, service: DiaryService, sample_diary: Diary):
        diary = await service.get_diary(sample_diary.id)

        assert diary.title == TITLE
        assert diary.comment == COMMENT

    @pytest.mark.asyncio
    async def test_missing_id_raises(self, service: DiaryService):
        with pytest.raises(DiaryNotFoundException) as exc_info:
            await service.get_diary(NOT_EXIST_ID)

        assert exc_info.value.id == NOT_EXIST_ID
        assert exc_info.value.status_code == 404


class TestCreateDiary:

    @pytest.mark.asyncio
    async def test_create_then_get(self, service: DiaryService):
        created = await service.create_diary(DiaryCreate(title="T"))

        assert created.id is not None
        assert (await service.get_diary(created.id)).title == "T"

    @pytest.mark.asyncio
    async def test_blank_title_is_not_persisted(self, service: DiaryService):
        with pytest.raises(BadInputException) as exc_info:
            await service.create_diary(DiaryCreate(title=" ", comment=COMMENT))

        assert exc_info.value.field == "title"
        assert await service.get_diaries() == []


class TestDeleteDiary:

    @pytest.mark.asyncio
    async def test_delete_then_get_raises(self, service: DiaryService, sample_diary: Diary):
        diary_id = sample_diary.id

        deleted = await service.delete_diary(diary_id)

        assert deleted.id == diary_id
        with pytest.raises(DiaryNotFoundException):
            await service.get_diary(diary_id)

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, service: DiaryService):
        with pytest.raises(DiaryNotFoundException):
            await service.delete_diary(NOT_EXIST_ID)


class TestDiaryServiceWithMockRepository:
    """Service delegation checked against a mocked repository."""

    @pytest.fixture
    def repository(self) -> AsyncMock:
        repository = AsyncMock()
        repository.get_by_id.side_effect = lambda id: (
            Diary(id=ID, title=TITLE, comment=COMMENT) if id == ID else None
        )
        return repository

    @pytest.fixture
    def mock_service(self, repository: AsyncMock) -> DiaryService:
        mock_uow = MagicMock()
        mock_uow.get_repository.return_value = repository
        return DiaryService(mock_uow)

    @pytest.mark.asyncio
    async def test_get_diary_looks_up_by_id(self, mock_service: DiaryService, repository: AsyncMock):
        diary = await mock_service.get_diary(ID)

        repository.get_by_id.assert_awaited_once_with(ID)
        assert diary.title == TITLE

    @pytest.mark.asyncio
    async def test_get_diary_missing(self, mock_service: DiaryService):
        with pytest.raises(DiaryNotFoundException):
            await mock_service.get_diary(NOT_EXIST_ID)

    @pytest.mark.asyncio
    async def test_blank_title_never_reaches_repository(
        self,
        mock_service: DiaryService,
        repository: AsyncMock
    ):
        with pytest.raises(BadInputException):
            await mock_service.create_diary(DiaryCreate(title=""))

        repository.create.assert_not_awaited()
