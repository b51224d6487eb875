"""
Shared fixtures.

The settings singleton reads the environment at import time, so the test
database and log directory are pointed at a throwaway directory before any
wayfare module is imported.
"""

import asyncio
import os
import tempfile
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="wayfare-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR / 'test.db'}"
os.environ["LOG_DIR"] = str(_TEST_DIR / "logs")
os.environ["CATALOG_BACKEND"] = "memory"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from wayfare.data.catalog import CARS, FLIGHTS, HOTELS
from wayfare.database import Base, async_session_factory, engine, init_models
from wayfare.main import app
from wayfare.models.user import User
from wayfare.schemas.catalog import Car, Flight, Hotel
from wayfare.services.catalog_store import InMemoryCatalogStore


async def _reset_database():
    await init_models()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db():
    """A session on a freshly emptied database."""
    await _reset_database()
    async with async_session_factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def user(db):
    traveler = User(
        email="traveler@wayfare.io",
        password_hash="not-a-real-hash",
        first_name="Alex",
        last_name="Traveler",
    )
    db.add(traveler)
    await db.commit()
    await db.refresh(traveler)
    return traveler


@pytest.fixture
def flights():
    return InMemoryCatalogStore.from_records(Flight, FLIGHTS)


@pytest.fixture
def hotels():
    return InMemoryCatalogStore.from_records(Hotel, HOTELS)


@pytest.fixture
def cars():
    return InMemoryCatalogStore.from_records(Car, CARS)


@pytest.fixture
def client():
    asyncio.run(_reset_database())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/auth/register",
        json={
            "email": "traveler@wayfare.io",
            "password": "password123",
            "firstName": "Alex",
            "lastName": "Traveler",
        },
    )
    assert response.status_code == 201, response.text
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}
