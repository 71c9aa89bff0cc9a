"""Service test fixtures — FastAPI test client and fake collaborators.

Invariants:
    - Route tests run against the real app with get_store_service overridden
    - Fakes record every call so tests can assert what reached a collaborator
    - db_manager restored after every test that swaps it

Design Decisions:
    - httpx AsyncClient over ASGITransport: no server, no lifespan, no database
    - Fakes implement the Protocols structurally (no inheritance needed)
"""

import pytest
from httpx import ASGITransport, AsyncClient

import ourzhop.infrastructure.database as db_module
from ourzhop.api.routes.stores import get_store_service
from ourzhop.core.domain_types import ManagerStatus
from ourzhop.main import app
from ourzhop.services.store_service import StoreService


class FakeStoreRepository:
    def __init__(self, existing_names: set[str] | None = None):
        self.existing_names = existing_names or set()
        self.inserted: list[tuple] = []

    async def exists_by_name(self, store_name: str) -> bool:
        return store_name in self.existing_names

    async def insert(self, store_id, request, created_at) -> None:
        self.inserted.append((store_id, request, created_at))


class FakeManagerDirectory:
    def __init__(self, statuses: dict[str, ManagerStatus] | None = None):
        self.statuses = statuses or {}
        self.lookups: list[str] = []

    async def verify_manager(self, manager_id: str) -> ManagerStatus:
        self.lookups.append(manager_id)
        return self.statuses.get(manager_id, ManagerStatus.ACTIVE)


@pytest.fixture
def store_repository():
    return FakeStoreRepository()


@pytest.fixture
def manager_directory():
    return FakeManagerDirectory()


@pytest.fixture
async def client():
    """FastAPI test client using the default (collaborator-free) service."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def wired_client(store_repository, manager_directory):
    """Test client whose StoreService has fake collaborators injected."""
    app.dependency_overrides[get_store_service] = lambda: StoreService(
        repository=store_repository, managers=manager_directory,
    )
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def restore_db_manager():
    original = db_module.db_manager
    yield
    db_module.db_manager = original
