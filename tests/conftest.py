"""
Pytest configuration and shared fixtures.

Repository and integration tests run against an in-memory SQLite database
through aiosqlite; service unit tests use the FakeTaskRepository from
tests/fakes.py.
"""
from datetime import datetime

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from core.cache import CacheManager
from core.database import init_db
from tests.fakes import FakeTaskRepository
from todo.config import TodoConfig
from todo.models.db_models import Category, Priority, Task
from todo.service import TaskService

ALICE = "alice@example.com"
BOB = "bob@example.com"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def seeded_session(session):
    """Two owners; alice has four tasks across two priorities and categories."""
    session.add_all([
        Priority(id=1, title="high", color="#ff0000", user_email=ALICE),
        Priority(id=2, title="low", color="#00ff00", user_email=ALICE),
        Category(id=1, title="home", user_email=ALICE),
        Category(id=2, title="work", user_email=ALICE),
    ])
    session.add_all([
        Task(id=1, title="call plumber", completed=False, task_date=datetime(2024, 5, 1, 10, 0),
             priority_id=1, category_id=1, user_email=ALICE),
        Task(id=2, title="buy milk", completed=True, task_date=datetime(2024, 5, 2, 12, 0),
             priority_id=1, category_id=1, user_email=ALICE),
        Task(id=3, title="Quarterly report", completed=False, task_date=datetime(2024, 5, 3, 9, 0),
             priority_id=1, category_id=2, user_email=ALICE),
        Task(id=4, title="archive mail", completed=False, task_date=None,
             priority_id=2, category_id=2, user_email=ALICE),
        Task(id=5, title="buy bread", completed=False, task_date=datetime(2024, 5, 2, 8, 0),
             priority_id=None, category_id=None, user_email=BOB),
    ])
    await session.flush()
    return session


@pytest.fixture
def fake_repo():
    return FakeTaskRepository()


@pytest.fixture
def caches():
    return CacheManager(ttl_seconds=60, max_entries=100)


@pytest.fixture
def service(fake_repo, caches):
    return TaskService(fake_repo, config=TodoConfig.default(), caches=caches)
