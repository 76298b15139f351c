"""Test config and shared fixtures."""
import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, delete
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.repository.unit_of_work import UnitOfWork
from apps.diaries.models import Diary
from apps.tasks.models import Task


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session."""
    # Import all models so they are registered in metadata
    import apps.models  # noqa: F401

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def uow(async_session: AsyncSession) -> UnitOfWork:
    """UnitOfWork over the test session."""
    return UnitOfWork(session=async_session)


@pytest.fixture
async def client(
    async_session: AsyncSession
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    from framework.dependencies import get_db

    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db

    # ASGITransport does not run the lifespan, so no MySQL connection is attempted
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def sample_diary(async_session: AsyncSession) -> Diary:
    """Create sample diary."""
    diary = Diary(title="Today's diary", comment="It was a day to regret")
    async_session.add(diary)
    await async_session.commit()
    await async_session.refresh(diary)
    return diary


@pytest.fixture
async def sample_task(async_session: AsyncSession, sample_diary: Diary) -> Task:
    """Create sample task under the sample diary."""
    task = Task(title="Write the retrospective", diary_id=sample_diary.id)
    async_session.add(task)
    await async_session.commit()
    await async_session.refresh(task)
    return task


@pytest.fixture(autouse=True)
async def cleanup_test_data(async_session: AsyncSession, request):
    """
    Delete test rows after each test. Disable with pytest option --no-cleanup.
    """
    yield

    if request.config.getoption("--no-cleanup", default=False):
        return

    await async_session.rollback()
    await async_session.execute(delete(Task))
    await async_session.execute(delete(Diary))
    await async_session.commit()


def pytest_addoption(parser):
    """Add pytest command-line options."""
    parser.addoption(
        "--no-cleanup",
        action="store_true",
        default=False,
        help="Disable auto-cleanup of test data"
    )
