"""Service test fixtures - async SQLite database, collaborators, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The app under test gets its registry/executor on app.state directly
      (ASGITransport does not run the lifespan)
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from lifeformula.db.base import Base
from lifeformula.infrastructure.database import DatabaseSessionManager
from lifeformula.main import create_app
from lifeformula.services.tool_executor import ToolExecutor
import lifeformula.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def executor(registry, dispatcher):
    return ToolExecutor(registry, dispatcher)


@pytest.fixture
async def client(registry, executor):
    """Test client over the static catalog, no usage gate."""
    app = create_app()
    app.state.registry = registry
    app.state.executor = executor
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
