"""Service test fixtures — FastAPI test client over the in-memory test DB.

Invariants:
    - get_db dependency overridden to use the test DB session factory
    - db_manager patched so the readiness probe sees the test engine
    - Payload builders return camelCase bodies exactly as a client would send

Design Decisions:
    - SQLite in-memory: fast, no external dependency, enforces UNIQUE and
      FOREIGN KEY constraints like the production store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db, DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app
from tests.services.payloads import customer_payload, product_payload


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
def make_customer(client):
    """POST a customer and return the response JSON."""
    async def _make(**overrides) -> dict:
        res = await client.post("/v1/customers", json=customer_payload(**overrides))
        assert res.status_code == 201, res.text
        return res.json()
    return _make


@pytest.fixture
def make_product(client):
    """POST a product and return the response JSON."""
    async def _make(**overrides) -> dict:
        res = await client.post("/v1/products", json=product_payload(**overrides))
        assert res.status_code == 201, res.text
        return res.json()
    return _make
