"""API test fixtures - FastAPI test clients.

Invariants:
    - client: UserService replaced by an AsyncMock (handler tests, no database)
    - db_client: full stack over in-memory SQLite, get_db overridden
    - dependency overrides and db_manager restored after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock

import user_crud.infrastructure.database as db_module
from user_crud.api.routes.users import get_user_service
from user_crud.infrastructure.database import DatabaseSessionManager, get_db
from user_crud.main import app
from user_crud.services.user_service import UserService


@pytest.fixture
def mock_service():
    """UserService double; async methods are AsyncMocks."""
    return AsyncMock(spec=UserService)


@pytest.fixture
async def client(mock_service):
    """FastAPI test client with the service dependency overridden."""
    app.dependency_overrides[get_user_service] = lambda: mock_service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def db_client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness check reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
