"""ParkingLot model."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class OperatingHours(BaseModel):
    """Daily opening window of a parking lot."""

    model_config = ConfigDict(frozen=True)

    open_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    close_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    is_24h: bool = False


class ParkingLot(BaseModel):
    """Parking lot - a physical facility with motorcycle and car sub-capacities."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    address: str
    # Decimal strings, e.g. "10.7769"
    latitude: str
    longitude: str
    owner_id: str

    motorcycle_capacity: int = 0
    car_capacity: int = 0
    # VND per hour
    motorcycle_price: int = 0
    car_price: int = 0
    current_motorcycle_spots: int = 0
    current_car_spots: int = 0

    facilities: Optional[List[str]] = None
    operating_hours: Optional[OperatingHours] = None

    # Aggregates of the lot's reviews
    rating: str = "0"
    total_reviews: int = 0

    status: str = Field(default="active", pattern="^(active|inactive|pending)$")
    description: Optional[str] = None
    created_at: datetime

    def __repr__(self):
        return f"<ParkingLot(id={self.id}, name={self.name})>"
