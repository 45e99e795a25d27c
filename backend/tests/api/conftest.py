"""Route test fixtures: in-memory collection + FastAPI test client.

Invariants:
    - Every test gets a fresh mongomock-motor collection
    - get_collection dependency overridden; the lifespan (and a real client) never runs
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from person_api.infrastructure.database import get_collection
from person_api.main import app


@pytest.fixture
def mock_collection():
    return AsyncMongoMockClient()["personsdb"]["person"]


def _client_for(collection):
    async def override_get_collection():
        yield collection

    app.dependency_overrides[get_collection] = override_get_collection
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(mock_collection):
    """FastAPI test client bound to the in-memory collection."""
    async with _client_for(mock_collection) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def failing_collection():
    """Collection whose every driver call raises the given PyMongoError."""
    collection = MagicMock()

    def fail_with(exc):
        collection.find.return_value.to_list = AsyncMock(side_effect=exc)
        collection.insert_one = AsyncMock(side_effect=exc)
        collection.update_one = AsyncMock(side_effect=exc)
        collection.delete_one = AsyncMock(side_effect=exc)
        return collection

    return fail_with


@pytest.fixture
async def failing_client_factory():
    clients = []

    def make(collection):
        c = _client_for(collection)
        clients.append(c)
        return c

    yield make
    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()


@pytest.fixture
async def created_person(client):
    """POST a person and return (id, body sent)."""
    body = {"FirstName": "Ann", "LastName": "Lee", "Email": "a@x.com", "Age": 30}
    res = await client.post("/person", json=body)
    assert res.status_code == 200
    return res.json()["inserted_id"], body
