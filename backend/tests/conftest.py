"""
To-Do List — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that touches the API gets a fresh SQLite (aiosqlite) task
       store; unit tests use a mocked AsyncSession instead.

Fixture Hierarchy:
    ├── mock_db_session: Mock database session (no real DB needed)
    ├── task_store:      Creates the tables, drops them and disposes the engine afterwards
    ├── test_client:     HTTPX AsyncClient talking to the FastAPI app in-process
    └── api_client:      TaskApiClient wired to the same in-process app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any todolist imports
_db_dir = tempfile.mkdtemp(prefix="todolist_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_db_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from todolist.database import create_tables, dispose_engine, drop_tables


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list(mock_db_session):
            mock_db_session.execute.return_value.scalars.return_value.all.return_value = []
            result = await task_service.list_all(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def task_store():
    """An empty tasks table for the duration of one test."""
    await create_tables()
    yield
    await drop_tables()
    # Pooled connections belong to this test's event loop
    await dispose_engine()


@pytest_asyncio.fixture
async def test_client(task_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/tasks")
            assert response.status_code == 200
    """
    from todolist.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def api_client(task_store):
    """TaskApiClient whose requests go straight into the FastAPI app."""
    from todolist.client.api import TaskApiClient
    from todolist.main import app
    async with TaskApiClient(base_url="http://test", transport=ASGITransport(app=app)) as client:
        yield client
