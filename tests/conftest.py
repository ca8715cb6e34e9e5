"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_store
from app.main import app
from app.store import MemoryStore


class TickingClock:
    """Deterministic clock, one second later on every call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture(scope="function")
def store() -> MemoryStore:
    """Empty store with a deterministic clock for each test."""
    return MemoryStore(clock=TickingClock())


@pytest.fixture(scope="function")
async def async_client(store: MemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client bound to the test store."""

    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(store: MemoryStore):
    """Factory registering users with unique defaults."""
    counter = iter(range(1, 10_000))

    def _make_user(points: int = 0, **overrides):
        n = next(counter)
        data = {
            "username": f"rider{n}",
            "email": f"rider{n}@example.com",
            "password": "secret",
            "full_name": f"Rider {n}",
        }
        data.update(overrides)
        user = store.create_user(data)
        if points:
            store.add_points(user.id, points, "seed", "Test balance")
        return store.get_user(user.id)

    return _make_user


@pytest.fixture
def make_lot(store: MemoryStore):
    """Factory registering parking lots."""

    def _make_lot(**overrides):
        data = {
            "name": "Test Lot",
            "address": "1 Test Street, District 1",
            "latitude": "10.7769",
            "longitude": "106.7009",
            "motorcycle_capacity": 10,
            "car_capacity": 5,
            "motorcycle_price": 3000,
            "car_price": 15000,
        }
        data.update(overrides)
        return store.create_parking_lot(data)

    return _make_lot
