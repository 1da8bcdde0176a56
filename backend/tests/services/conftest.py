"""Service test fixtures - UserService over a real SQLite-backed repository.

Invariants:
    - The service under test uses its own session, separate from the seeding session
"""

import pytest

from user_crud.infrastructure.user_repository import SqlUserRepository
from user_crud.services.user_service import UserService


@pytest.fixture
async def repo_session(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(repo_session):
    return SqlUserRepository(repo_session)


@pytest.fixture
def user_service(repository):
    return UserService(repository)
