"""API v1 router."""

from fastapi import APIRouter

from app.api.v1.endpoints import community_updates, parking_lots, reviews, rewards, users

api_router = APIRouter()

api_router.include_router(parking_lots.router, prefix="/parking-lots", tags=["parking-lots"])
api_router.include_router(reviews.router, prefix="/reviews", tags=["reviews"])
api_router.include_router(
    community_updates.router, prefix="/community-updates", tags=["community-updates"]
)
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(rewards.router, prefix="/rewards", tags=["rewards"])
