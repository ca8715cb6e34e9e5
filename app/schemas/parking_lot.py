"""ParkingLot schemas."""

import math
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from app.models.parking_lot import OperatingHours

KNOWN_FACILITIES = frozenset(
    {
        "covered",
        "security",
        "camera",
        "toilet",
        "water",
        "wifi",
        "ev_charging",
        "valet",
        "elevator",
    }
)


def to_number(value: Any, default: float = 0) -> float:
    """Coerce loosely typed numeric input, falling back to ``default``."""
    if isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_coordinate(value: Any) -> str:
    """Render a coordinate as a decimal string ("10.7769", "106")."""
    text = repr(float(to_number(value)))
    return text[:-2] if text.endswith(".0") else text


def normalize_facilities(value: Any) -> Optional[List[str]]:
    """Accept a single tag or a list of tags; anything else means no facilities."""
    if isinstance(value, (list, tuple, set, frozenset)):
        return [str(item) for item in value]
    if isinstance(value, str) and value.strip():
        return [value]
    return None


def check_known_facilities(value: Optional[List[str]]) -> Optional[List[str]]:
    if value:
        unknown = sorted(set(value) - KNOWN_FACILITIES)
        if unknown:
            raise ValueError(f"Unknown facilities: {', '.join(unknown)}")
    return value


class ParkingLotBase(BaseModel):
    """Base parking lot schema."""

    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    latitude: str = "0"
    longitude: str = "0"
    motorcycle_capacity: int = Field(default=0, ge=0)
    car_capacity: int = Field(default=0, ge=0)
    motorcycle_price: int = Field(default=0, ge=0)
    car_price: int = Field(default=0, ge=0)
    facilities: Optional[List[str]] = None
    operating_hours: Optional[OperatingHours] = None
    description: Optional[str] = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def normalize_coordinate(cls, value: Any) -> str:
        return to_coordinate(value)

    @field_validator(
        "motorcycle_capacity", "car_capacity", "motorcycle_price", "car_price", mode="before"
    )
    @classmethod
    def normalize_amount(cls, value: Any) -> int:
        return int(to_number(value))

    @field_validator("facilities", mode="before")
    @classmethod
    def normalize_facility_input(cls, value: Any) -> Optional[List[str]]:
        return normalize_facilities(value)

    @field_validator("facilities")
    @classmethod
    def known_facilities(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_known_facilities(value)


class ParkingLotCreate(ParkingLotBase):
    """Schema for registering a parking lot.

    ``lat``/``lng`` are accepted in place of ``latitude``/``longitude``.
    Current spot counts default to the capacities when omitted.
    """

    owner_id: Optional[str] = None
    current_motorcycle_spots: Optional[int] = None
    current_car_spots: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def accept_short_coordinates(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            for short, full in (("lat", "latitude"), ("lng", "longitude")):
                if data.get(full) is None and data.get(short) is not None:
                    data[full] = data[short]
            for full in ("latitude", "longitude"):
                if data.get(full) is None:
                    data.pop(full, None)
        return data

    @field_validator("current_motorcycle_spots", "current_car_spots", mode="before")
    @classmethod
    def normalize_spots(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return int(to_number(value))


class ParkingLotUpdate(BaseModel):
    """Schema for updating a parking lot."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=500)
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    motorcycle_capacity: Optional[int] = Field(None, ge=0)
    car_capacity: Optional[int] = Field(None, ge=0)
    motorcycle_price: Optional[int] = Field(None, ge=0)
    car_price: Optional[int] = Field(None, ge=0)
    current_motorcycle_spots: Optional[int] = Field(None, ge=0)
    current_car_spots: Optional[int] = Field(None, ge=0)
    facilities: Optional[List[str]] = None
    operating_hours: Optional[OperatingHours] = None
    status: Optional[str] = Field(None, pattern="^(active|inactive|pending)$")
    description: Optional[str] = None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def normalize_coordinate(cls, value: Any) -> str:
        if value is None:
            raise ValueError("Field cannot be null")
        return to_coordinate(value)

    @field_validator(
        "name",
        "address",
        "motorcycle_capacity",
        "car_capacity",
        "motorcycle_price",
        "car_price",
        "current_motorcycle_spots",
        "current_car_spots",
        "status",
        mode="before",
    )
    @classmethod
    def not_null(cls, value: Any) -> Any:
        # Only facilities, operating_hours and description can be cleared
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    @field_validator("facilities", mode="before")
    @classmethod
    def normalize_facility_input(cls, value: Any) -> Optional[List[str]]:
        return normalize_facilities(value)

    @field_validator("facilities")
    @classmethod
    def known_facilities(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return check_known_facilities(value)


class ParkingLotSearch(BaseModel):
    """Search filters. Every field is optional and filters combine with AND.

    ``max_distance`` is accepted but not applied.
    """

    search: Optional[str] = None
    vehicle_type: Optional[str] = Field(None, pattern="^(motorcycle|car|both)$")
    max_price: Optional[int] = Field(None, ge=0)
    available_only: bool = False
    min_rating: Optional[float] = Field(None, ge=0.0, le=5.0)
    max_distance: Optional[float] = Field(None, ge=0.0)


class ParkingLotResponse(BaseModel):
    """Schema for parking lot response."""

    id: str
    name: str
    address: str
    latitude: str
    longitude: str
    owner_id: str
    motorcycle_capacity: int
    car_capacity: int
    motorcycle_price: int
    car_price: int
    current_motorcycle_spots: int
    current_car_spots: int
    facilities: Optional[List[str]]
    operating_hours: Optional[OperatingHours]
    rating: str
    total_reviews: int
    status: str
    description: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def lat(self) -> float:
        return to_number(self.latitude)

    @computed_field
    @property
    def lng(self) -> float:
        return to_number(self.longitude)
