"""ParkingLot endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_store
from app.schemas.parking_lot import (
    ParkingLotCreate,
    ParkingLotResponse,
    ParkingLotSearch,
    ParkingLotUpdate,
)
from app.schemas.review import ReviewResponse
from app.store import ANONYMOUS_OWNER_ID, MemoryStore
from app.store.rules import LOT_REGISTRATION_POINTS

router = APIRouter()


@router.get("", response_model=List[ParkingLotResponse])
async def list_parking_lots(store: MemoryStore = Depends(get_store)):
    """List all parking lots."""
    return store.get_parking_lots()


@router.post("", response_model=ParkingLotResponse, status_code=status.HTTP_201_CREATED)
async def create_parking_lot(
    lot_data: ParkingLotCreate,
    store: MemoryStore = Depends(get_store),
):
    """Register a parking lot and reward its owner."""
    lot = store.create_parking_lot(lot_data)

    if lot.owner_id != ANONYMOUS_OWNER_ID:
        store.add_points(
            lot.owner_id,
            LOT_REGISTRATION_POINTS,
            "lot_registration",
            f"Registered parking lot {lot.name}",
        )

    return lot


@router.get("/search", response_model=List[ParkingLotResponse])
async def search_parking_lots(
    search: Optional[str] = Query(None, description="Text to find in name or address"),
    vehicle_type: Optional[str] = Query(None, pattern="^(motorcycle|car|both)$"),
    max_price: Optional[int] = Query(None, ge=0, description="Max hourly price for vehicle_type"),
    available_only: bool = Query(False, description="Only lots with a free spot"),
    min_rating: Optional[float] = Query(None, ge=0.0, le=5.0),
    max_distance: Optional[float] = Query(None, ge=0.0, description="Accepted, not applied"),
    store: MemoryStore = Depends(get_store),
):
    """Search active parking lots. All filters must match."""
    filters = ParkingLotSearch(
        search=search,
        vehicle_type=vehicle_type,
        max_price=max_price,
        available_only=available_only,
        min_rating=min_rating,
        max_distance=max_distance,
    )
    return store.search_parking_lots(filters)


@router.get("/{lot_id}", response_model=ParkingLotResponse)
async def get_parking_lot(
    lot_id: str,
    store: MemoryStore = Depends(get_store),
):
    """Get a specific parking lot by ID."""
    lot = store.get_parking_lot(lot_id)

    if not lot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parking lot with id {lot_id} not found",
        )

    return lot


@router.patch("/{lot_id}", response_model=ParkingLotResponse)
async def update_parking_lot(
    lot_id: str,
    lot_data: ParkingLotUpdate,
    store: MemoryStore = Depends(get_store),
):
    """Update a parking lot."""
    lot = store.update_parking_lot(lot_id, lot_data.model_dump(exclude_unset=True))

    if not lot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Parking lot with id {lot_id} not found",
        )

    return lot


@router.get("/{lot_id}/reviews", response_model=List[ReviewResponse])
async def list_parking_lot_reviews(
    lot_id: str,
    store: MemoryStore = Depends(get_store),
):
    """List reviews of a parking lot."""
    return store.get_reviews_by_parking_lot(lot_id)
