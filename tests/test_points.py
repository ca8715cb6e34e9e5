"""Tests for points, member tiers and the points ledger."""

import pytest
from httpx import AsyncClient

from app.store import MemoryStore
from app.store.rules import tier_for_points


@pytest.mark.parametrize(
    "points, tier",
    [
        (0, "bronze"),
        (499, "bronze"),
        (500, "silver"),
        (1499, "silver"),
        (1500, "gold"),
        (10_000, "gold"),
    ],
)
def test_tier_for_points(points, tier):
    assert tier_for_points(points) == tier


def test_tier_follows_balance(store: MemoryStore, make_user):
    """Test the tier is recomputed after every points change."""
    user = make_user()
    steps = [(499, "bronze"), (1, "silver"), (1000, "gold"), (-1, "silver"), (-1000, "bronze")]

    for delta, tier in steps:
        store.add_points(user.id, delta, "test")
        current = store.get_user(user.id)
        assert current.member_tier == tier
        assert current.member_tier == tier_for_points(current.points)


def test_add_points_clamps_at_zero(store: MemoryStore, make_user):
    """Test the balance never goes negative."""
    user = make_user(points=50)

    store.add_points(user.id, -999_999, "x")

    assert store.get_user(user.id).points == 0
    assert store.get_user(user.id).member_tier == "bronze"


def test_clamped_ledger_keeps_requested_delta(store: MemoryStore, make_user):
    """Test the ledger records the raw delta, so it no longer sums to the balance."""
    user = make_user(points=50)

    entry = store.add_points(user.id, -80, "penalty", "Spam report")

    assert entry.points == -80
    assert entry.description == "Spam report"
    history = store.get_points_history(user.id)
    assert sum(h.points for h in history) == -30
    assert store.get_user(user.id).points == 0


def test_ledger_sums_to_balance_without_clamping(store: MemoryStore, make_user):
    user = make_user()
    for delta in (50, 10, 5, -20):
        store.add_points(user.id, delta, "activity")

    history = store.get_points_history(user.id)
    assert sum(h.points for h in history) == store.get_user(user.id).points == 45


def test_add_points_unknown_user_is_ignored(store: MemoryStore):
    assert store.add_points("missing", 10, "status_update") is None
    assert store.get_points_history("missing") == []


def test_points_history_newest_first(store: MemoryStore, make_user):
    user = make_user()
    store.add_points(user.id, 50, "lot_registration")
    store.add_points(user.id, 10, "status_update")
    store.add_points(user.id, 5, "review")

    history = store.get_points_history(user.id)

    assert [h.activity for h in history] == ["review", "status_update", "lot_registration"]
    assert all(h.user_id == user.id for h in history)


def test_points_history_is_per_user(store: MemoryStore, make_user):
    first = make_user()
    second = make_user()
    store.add_points(first.id, 10, "status_update")

    assert len(store.get_points_history(first.id)) == 1
    assert store.get_points_history(second.id) == []


@pytest.mark.asyncio
async def test_get_points_history(async_client: AsyncClient, store: MemoryStore, make_user):
    """Test the points history endpoint."""
    user = make_user()
    store.add_points(user.id, 10, "status_update", "Parking lot status update")
    store.add_points(user.id, 5, "review")

    response = await async_client.get(f"/api/users/{user.id}/points-history")
    assert response.status_code == 200
    data = response.json()
    assert [entry["points"] for entry in data] == [5, 10]
    assert data[1]["description"] == "Parking lot status update"
    assert data[0]["description"] is None
