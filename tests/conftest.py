"""
Pytest fixtures: in-memory resource server, HTTP transport, session
manager and trip controller.

The client talks to the FastAPI resource server in-process through
httpx.ASGITransport; each test gets a fresh ResourceStore via a
dependency override.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from triptracker.infrastructure.http_transport import HttpTransport
from triptracker.server.main import app
from triptracker.server.store import ResourceStore, get_store
from triptracker.services.auth_service import SessionManager
from triptracker.services.interfaces.memory_session_store import MemorySessionStore
from triptracker.services.trip_service import TripListController
from triptracker.schemas.user import UserLogin

BASE_URL = "http://test"


@pytest.fixture
def store() -> ResourceStore:
    return ResourceStore()


@pytest_asyncio.fixture
async def client(store: ResourceStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client wired to the resource server with a fresh store."""
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api(client: AsyncClient) -> HttpTransport:
    return HttpTransport(base_url=BASE_URL, client=client)


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest_asyncio.fixture
async def session(api: HttpTransport, session_store: MemorySessionStore) -> SessionManager:
    manager = SessionManager(api, session_store)
    manager.restore()
    return manager


@pytest.fixture
def alice(store: ResourceStore) -> dict:
    """A stored user, created directly in the store."""
    return store.create("users", {
        "id": "1700000000000",
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret",
        "fullName": "Alice Liddell",
        "avatar": None,
        "createdAt": "2024-01-01T00:00:00.000Z",
    })


@pytest.fixture
def bob(store: ResourceStore) -> dict:
    return store.create("users", {
        "id": "1700000000001",
        "username": "bob",
        "email": "bob@example.com",
        "password": "hunter2",
        "fullName": "Bob Builder",
        "avatar": None,
        "createdAt": "2024-01-02T00:00:00.000Z",
    })


@pytest_asyncio.fixture
async def signed_in(session: SessionManager, alice: dict) -> SessionManager:
    result = await session.login(UserLogin(email_or_username="alice", password="secret"))
    assert result.success
    return session


@pytest_asyncio.fixture
async def controller(api: HttpTransport, signed_in: SessionManager) -> TripListController:
    trips = TripListController(api, signed_in)
    await trips.load()
    return trips


@pytest.fixture
def make_trip(store: ResourceStore):
    """Factory - store a trip record with sensible defaults."""

    def _make(trip_id: str, user_id: str, **fields) -> dict:
        record = {
            "id": trip_id,
            "userId": user_id,
            "vehicleType": "car",
            "route": f"Route {trip_id}",
            "distance": 10,
            "date": "2024-01-01",
            "notes": "",
            "images": [],
            "highlightImage": 0,
            "isFavorite": False,
            "createdAt": "2024-01-01T00:00:00.000Z",
        }
        record.update(fields)
        return store.create("trips", record)

    return _make
