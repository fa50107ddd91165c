# tests/conftest.py

import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "testing"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from client_orders.adapters.outbound.persistence.database import create_session_factory, create_tables, get_db
from client_orders.adapters.outbound.persistence.models import Product
from client_orders.main import app


@pytest.fixture
async def engine():
    # One shared connection so every session sees the same in-memory database
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
async def products(db_session):
    """Two products: a 10.00 widget and a 2.50 gadget."""
    catalog = [Product(name="Widget", price=10.0), Product(name="Gadget", price=2.5)]
    db_session.add_all(catalog)
    await db_session.commit()
    return catalog


@pytest.fixture
async def customer(client):
    response = await client.post("/clients", json={"name": "John Doe", "email": "john@example.com"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def auth_headers(client):
    await client.post(
        "/auth/register",
        json={"name": "Tester", "email": "tester@example.com", "password": "secret123"},
    )
    response = await client.post("/auth/login", json={"email": "tester@example.com", "password": "secret123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
