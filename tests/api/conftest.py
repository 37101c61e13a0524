"""API test fixtures — FastAPI test client around an in-memory store.

Invariants:
    - Every test gets a fresh mongomock client (root conftest), so collections start empty
    - The app is built with an injected TodoStore; the lifespan never opens a real connection

Design Decisions:
    - mongomock-motor over a live server: exercises the real TodoStore queries
      without an external dependency
    - ASGITransport does not run the lifespan; create_app() puts the injected
      store on app.state directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.main import create_app


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_todo(store):
    """Insert one incomplete record directly through the store."""
    return await store.insert_one("Seeded task")
