"""User endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_store
from app.schemas.parking_lot import ParkingLotResponse
from app.schemas.points_history import PointsHistoryResponse
from app.schemas.reward import UserRewardResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.store import ConflictError, MemoryStore

router = APIRouter()


def _get_user_or_404(store: MemoryStore, user_id: str):
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found",
        )
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    store: MemoryStore = Depends(get_store),
):
    """Register a user."""
    try:
        return store.create_user(user_data)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    store: MemoryStore = Depends(get_store),
):
    """Get a specific user by ID."""
    return _get_user_or_404(store, user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_data: UserUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Update a user profile."""
    _get_user_or_404(store, user_id)
    update_data = user_data.model_dump(exclude_unset=True)

    for field, lookup in (("email", store.get_user_by_email), ("username", store.get_user_by_username)):
        if update_data.get(field) is None:
            continue
        other = lookup(update_data[field])
        if other and other.id != user_id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"User with {field} {update_data[field]} already exists",
            )

    user = store.update_user(user_id, update_data)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User with id {user_id} not found",
        )
    return user


@router.get("/{user_id}/parking-lots", response_model=List[ParkingLotResponse])
async def list_user_parking_lots(
    user_id: str,
    store: MemoryStore = Depends(get_store),
):
    """Parking lots registered by a user."""
    return store.get_parking_lots_by_owner(user_id)


@router.get("/{user_id}/rewards", response_model=List[UserRewardResponse])
async def list_user_rewards(
    user_id: str,
    store: MemoryStore = Depends(get_store),
):
    """Rewards redeemed by a user."""
    return store.get_user_rewards(user_id)


@router.get("/{user_id}/points-history", response_model=List[PointsHistoryResponse])
async def get_points_history(
    user_id: str,
    store: MemoryStore = Depends(get_store),
):
    """Points ledger of a user, newest first."""
    return store.get_points_history(user_id)
