"""API test fixtures: FastAPI test clients over the test DB or a stub repository.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes see the test engine
    - stub_client swaps the whole repository for a recording stub
"""

import pytest
from httpx import ASGITransport, AsyncClient

from museum_api.api.dependencies import get_repository
from museum_api.infrastructure.database import get_db, DatabaseSessionManager
import museum_api.infrastructure.database as db_module
from museum_api.main import app
from tests.api.stub_repository import StubRepository


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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


@pytest.fixture
def stub_repo():
    return StubRepository()


@pytest.fixture
async def stub_client(stub_repo):
    """Test client whose routes talk to stub_repo instead of a database."""
    app.dependency_overrides[get_repository] = lambda: stub_repo
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
