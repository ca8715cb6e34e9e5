"""Domain models package."""

from app.models.community_update import CommunityUpdate
from app.models.parking_lot import OperatingHours, ParkingLot
from app.models.points_history import PointsHistory
from app.models.review import Review
from app.models.reward import Reward, UserReward
from app.models.user import User

__all__ = [
    "CommunityUpdate",
    "OperatingHours",
    "ParkingLot",
    "PointsHistory",
    "Review",
    "Reward",
    "UserReward",
    "User",
]
