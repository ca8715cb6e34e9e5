"""Tests for reviews and lot rating aggregation."""

import pytest
from httpx import AsyncClient

from app.store import MemoryStore
from app.store.rules import average_rating


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ([], "0"),
        ([5], "5.00"),
        ([5, 4], "4.50"),
        ([5, 4, 4], "4.33"),
        ([1, 2], "1.50"),
        ([5, 5, 5, 5, 4, 4, 4, 1], "4.13"),
    ],
)
def test_average_rating(ratings, expected):
    assert average_rating(ratings) == expected


def test_create_review_updates_lot_aggregate(store: MemoryStore, make_lot):
    """Test the lot rating is the mean of its reviews."""
    lot = make_lot()
    other = make_lot()

    for rating in (5, 4, 4):
        store.create_review({"parking_lot_id": lot.id, "user_id": "u1", "rating": rating})
    store.create_review({"parking_lot_id": other.id, "user_id": "u1", "rating": 1})

    lot = store.get_parking_lot(lot.id)
    assert lot.rating == "4.33"
    assert lot.total_reviews == 3
    assert lot.total_reviews == len(store.get_reviews_by_parking_lot(lot.id))
    assert store.get_parking_lot(other.id).rating == "1.00"


def test_create_review_for_unknown_lot(store: MemoryStore, make_lot):
    """Test a review of a missing lot is kept without touching other lots."""
    lot = make_lot()

    review = store.create_review(
        {"parking_lot_id": "missing", "user_id": "u1", "rating": 3, "comment": "Where?"}
    )

    assert store.get_reviews_by_parking_lot("missing") == [review]
    assert store.get_parking_lot(lot.id) == lot


@pytest.mark.asyncio
async def test_create_review(async_client: AsyncClient, store: MemoryStore, make_user, make_lot):
    """Test posting a review rewards the author and re-rates the lot."""
    user = make_user()
    lot = make_lot()

    response = await async_client.post(
        "/api/reviews",
        json={"parking_lot_id": lot.id, "user_id": user.id, "rating": 4, "comment": "Rộng rãi"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["rating"] == 4
    assert data["comment"] == "Rộng rãi"
    assert "id" in data

    assert store.get_user(user.id).points == 5
    assert store.get_points_history(user.id)[0].activity == "review"

    response = await async_client.get(f"/api/parking-lots/{lot.id}")
    assert response.json()["rating"] == "4.00"
    assert response.json()["total_reviews"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("rating", [0, 6, "great"])
async def test_create_review_invalid_rating(async_client: AsyncClient, store: MemoryStore, make_lot, rating):
    """Test out-of-range ratings are rejected before storing."""
    lot = make_lot()

    response = await async_client.post(
        "/api/reviews",
        json={"parking_lot_id": lot.id, "user_id": "u1", "rating": rating},
    )
    assert response.status_code == 400
    assert store.get_reviews_by_parking_lot(lot.id) == []


@pytest.mark.asyncio
async def test_list_parking_lot_reviews(async_client: AsyncClient, store: MemoryStore, make_lot):
    """Test listing reviews of a lot."""
    lot = make_lot()
    store.create_review({"parking_lot_id": lot.id, "user_id": "u1", "rating": 5})
    store.create_review({"parking_lot_id": lot.id, "user_id": "u2", "rating": 3})

    response = await async_client.get(f"/api/parking-lots/{lot.id}/reviews")
    assert response.status_code == 200
    assert sorted(review["rating"] for review in response.json()) == [3, 5]
