"""Tests for the reward catalog and redemption."""

import pytest
from httpx import AsyncClient

from app.store import InsufficientPointsError, MemoryStore, NotFoundError


@pytest.fixture
def make_reward(store: MemoryStore):
    def _make_reward(**overrides):
        data = {
            "name": "Voucher Grab 20k",
            "description": "20,000 VND off a ride",
            "points_cost": 100,
            "category": "transport",
            "icon": "fas fa-gift",
        }
        data.update(overrides)
        return store.create_reward(data)

    return _make_reward


def test_get_rewards_only_active(store: MemoryStore, make_reward):
    active = make_reward()
    make_reward(name="Retired", is_active=False)

    assert store.get_rewards() == [active]


def test_redeem_reward(store: MemoryStore, make_user, make_reward):
    """Test redemption deducts exactly the cost and records one entry of each kind."""
    user = make_user(points=250)
    reward = make_reward(points_cost=100)
    history_before = len(store.get_points_history(user.id))

    redemption = store.redeem_reward(user.id, reward.id)

    assert store.get_user(user.id).points == 150
    assert store.get_user_rewards(user.id) == [redemption]
    assert redemption.reward_id == reward.id
    history = store.get_points_history(user.id)
    assert len(history) == history_before + 1
    assert (history[0].points, history[0].activity) == (-100, "reward_redemption")
    assert history[0].description == reward.name


def test_redeem_reward_lowers_tier(store: MemoryStore, make_user, make_reward):
    user = make_user(points=500)
    reward = make_reward(points_cost=300)
    assert user.member_tier == "silver"

    store.redeem_reward(user.id, reward.id)

    assert store.get_user(user.id).member_tier == "bronze"


def test_redeem_reward_exact_balance(store: MemoryStore, make_user, make_reward):
    user = make_user(points=100)
    reward = make_reward(points_cost=100)

    store.redeem_reward(user.id, reward.id)

    assert store.get_user(user.id).points == 0


def test_redeem_reward_insufficient_points(store: MemoryStore, make_user, make_reward):
    """Test a failed redemption changes nothing."""
    user = make_user(points=99)
    reward = make_reward(points_cost=100)
    history_before = store.get_points_history(user.id)

    with pytest.raises(InsufficientPointsError) as excinfo:
        store.redeem_reward(user.id, reward.id)

    assert excinfo.value.message == "Insufficient points"
    assert (excinfo.value.required, excinfo.value.available) == (100, 99)
    assert store.get_user(user.id).points == 99
    assert store.get_user_rewards(user.id) == []
    assert store.get_points_history(user.id) == history_before


@pytest.mark.parametrize("missing", ["user", "reward"])
def test_redeem_reward_not_found(store: MemoryStore, make_user, make_reward, missing):
    user = make_user(points=500)
    reward = make_reward()
    user_id = "missing" if missing == "user" else user.id
    reward_id = "missing" if missing == "reward" else reward.id

    with pytest.raises(NotFoundError):
        store.redeem_reward(user_id, reward_id)

    assert store.get_user(user.id).points == 500


@pytest.mark.asyncio
async def test_list_rewards(async_client: AsyncClient, make_reward):
    """Test listing the active catalog."""
    make_reward(name="Voucher Starbucks", category="food", points_cost=150)
    make_reward(name="Hidden", is_active=False)

    response = await async_client.get("/api/rewards")
    assert response.status_code == 200
    data = response.json()
    assert [reward["name"] for reward in data] == ["Voucher Starbucks"]
    assert data[0]["points_cost"] == 150


@pytest.mark.asyncio
async def test_redeem_reward_endpoint(async_client: AsyncClient, store: MemoryStore, make_user, make_reward):
    """Test redeeming a reward over HTTP."""
    user = make_user(points=150)
    reward = make_reward(points_cost=100)

    response = await async_client.post(f"/api/rewards/{reward.id}/redeem", json={"user_id": user.id})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Reward redeemed successfully"
    assert data["redemption"]["reward_id"] == reward.id
    assert store.get_user(user.id).points == 50

    response = await async_client.get(f"/api/users/{user.id}/rewards")
    assert [r["id"] for r in response.json()] == [data["redemption"]["id"]]


@pytest.mark.asyncio
async def test_redeem_reward_requires_user_id(async_client: AsyncClient, make_reward):
    reward = make_reward()

    response = await async_client.post(f"/api/rewards/{reward.id}/redeem", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "User ID is required"


@pytest.mark.asyncio
async def test_redeem_reward_insufficient_points_endpoint(async_client: AsyncClient, make_user, make_reward):
    user = make_user(points=10)
    reward = make_reward(points_cost=100)

    response = await async_client.post(f"/api/rewards/{reward.id}/redeem", json={"user_id": user.id})
    assert response.status_code == 400
    assert response.json()["detail"] == "Insufficient points"


@pytest.mark.asyncio
async def test_redeem_unknown_reward_endpoint(async_client: AsyncClient, make_user):
    user = make_user(points=1000)

    response = await async_client.post("/api/rewards/missing/redeem", json={"user_id": user.id})
    assert response.status_code == 400
    assert response.json()["detail"] == "Reward or user not found"
