"""Test the get_session transaction boundary."""
import pytest
from sqlalchemy import func, inspect, select

from core import database
from core.cache import CacheManager
from core.errors import IncorrectDataError
from todo.models.db_models import Task
from todo.models.schemas import TaskSearchValues, TaskWrite
from todo.repository import TaskRepository
from todo.service import TaskService

EMAIL = "user@example.com"


@pytest.fixture
def sessions(session_factory, monkeypatch):
    monkeypatch.setattr(database, "async_session_factory", session_factory)
    return session_factory


async def _task_count(session_factory) -> int:
    async with session_factory() as s:
        result = await s.execute(select(func.count()).select_from(Task))
        return result.scalar()


@pytest.mark.asyncio
async def test_get_session_commits_on_success(sessions):
    gen = database.get_session()
    session = await gen.__anext__()
    service = TaskService(TaskRepository(session), caches=CacheManager())
    await service.add(TaskWrite(title="write report", user_email=EMAIL))

    with pytest.raises(StopAsyncIteration):
        await gen.__anext__()

    assert await _task_count(sessions) == 1


@pytest.mark.asyncio
async def test_get_session_rolls_back_on_incorrect_data(sessions):
    gen = database.get_session()
    session = await gen.__anext__()
    service = TaskService(TaskRepository(session), caches=CacheManager())
    await service.add(TaskWrite(title="write report", user_email=EMAIL))

    with pytest.raises(IncorrectDataError) as exc_info:
        await service.find_by_params(TaskSearchValues(email=" "))

    with pytest.raises(IncorrectDataError, match="missed param: email"):
        await gen.athrow(exc_info.value)

    assert await _task_count(sessions) == 0


@pytest.mark.asyncio
async def test_init_db_creates_task_tables(engine):
    async with engine.connect() as conn:
        names = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).get_table_names()
        )
    assert {"tasks", "priorities", "categories"} <= set(names)
