"""Root conftest — shared fixtures: fresh store, service, app, and HTTP client.

Invariants:
    - Every test gets its own store (ids restart at 1)
    - The app is built by create_app() with the test's service injected
"""

import pytest
from httpx import ASGITransport, AsyncClient

from quotes_api.infrastructure.memory_store import InMemoryQuoteStore
from quotes_api.main import create_app
from quotes_api.services.quote_service import QuoteService


@pytest.fixture
def store():
    return InMemoryQuoteStore()


@pytest.fixture
def service(store):
    return QuoteService(store)


@pytest.fixture
def app(service):
    return create_app(service)


@pytest.fixture
async def client(app):
    """FastAPI test client over ASGI — no network."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
