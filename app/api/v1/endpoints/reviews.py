"""Review endpoints."""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_store
from app.schemas.review import ReviewCreate, ReviewResponse
from app.store import MemoryStore
from app.store.rules import REVIEW_POINTS

router = APIRouter()


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    review_data: ReviewCreate,
    store: MemoryStore = Depends(get_store),
):
    """Review a parking lot. The author earns review points."""
    review = store.create_review(review_data)
    store.add_points(review.user_id, REVIEW_POINTS, "review", "Parking lot review")
    return review
