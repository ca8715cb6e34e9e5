"""Schemas package."""

from app.schemas.community_update import CommunityUpdateCreate, CommunityUpdateResponse
from app.schemas.parking_lot import (
    ParkingLotCreate,
    ParkingLotResponse,
    ParkingLotSearch,
    ParkingLotUpdate,
)
from app.schemas.points_history import PointsHistoryResponse
from app.schemas.review import ReviewCreate, ReviewResponse
from app.schemas.reward import (
    RedeemRequest,
    RedeemResponse,
    RewardCreate,
    RewardResponse,
    UserRewardResponse,
)
from app.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "CommunityUpdateCreate",
    "CommunityUpdateResponse",
    "ParkingLotCreate",
    "ParkingLotResponse",
    "ParkingLotSearch",
    "ParkingLotUpdate",
    "PointsHistoryResponse",
    "ReviewCreate",
    "ReviewResponse",
    "RedeemRequest",
    "RedeemResponse",
    "RewardCreate",
    "RewardResponse",
    "UserRewardResponse",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
