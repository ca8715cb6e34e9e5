"""In-memory store for parking lots, community activity and loyalty points."""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from uuid import uuid4

from app.models import (
    CommunityUpdate,
    ParkingLot,
    PointsHistory,
    Review,
    Reward,
    User,
    UserReward,
)
from app.schemas.community_update import CommunityUpdateCreate
from app.schemas.parking_lot import ParkingLotCreate, ParkingLotSearch
from app.schemas.review import ReviewCreate
from app.schemas.reward import RewardCreate
from app.schemas.user import UserCreate
from app.store.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    InsufficientPointsError,
    NotFoundError,
)
from app.store.rules import COMMUNITY_UPDATE_POINTS, average_rating, tier_for_points
from app.store.search import filter_parking_lots

logger = logging.getLogger(__name__)

ANONYMOUS_OWNER_ID = "anonymous"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def _merge(record, fields: Mapping[str, Any]):
    """Shallow-merge known fields into a frozen record, keeping its id."""
    update = {
        key: value
        for key, value in fields.items()
        if key in type(record).model_fields and key != "id"
    }
    return record.model_copy(update=update)


class MemoryStore:
    """Authoritative in-memory store, one dict per entity type keyed by id.

    Records are immutable; updates replace them. Operations that touch more
    than one record hold ``_lock`` from the first read to the last write, so
    they stay atomic when called from several threads.

    ``clock`` supplies every timestamp the store writes.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow):
        self._clock = clock
        self._lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._parking_lots: Dict[str, ParkingLot] = {}
        self._reviews: Dict[str, Review] = {}
        self._community_updates: Dict[str, CommunityUpdate] = {}
        self._rewards: Dict[str, Reward] = {}
        self._user_rewards: Dict[str, UserReward] = {}
        self._points_history: Dict[str, PointsHistory] = {}

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def create_user(self, data: Union[UserCreate, Mapping[str, Any]]) -> User:
        """Register a user with zero points at bronze tier.

        Raises DuplicateEmailError or DuplicateUsernameError without storing anything.
        """
        if not isinstance(data, UserCreate):
            data = UserCreate.model_validate(data)

        with self._lock:
            if self.get_user_by_email(data.email) is not None:
                logger.warning(f"Rejected registration, email already taken: {data.email}")
                raise DuplicateEmailError(data.email)
            if self.get_user_by_username(data.username) is not None:
                logger.warning(f"Rejected registration, username already taken: {data.username}")
                raise DuplicateUsernameError(data.username)

            user = User(
                id=new_id(),
                points=0,
                member_tier=tier_for_points(0),
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._users[user.id] = user

        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def update_user(self, user_id: str, fields: Mapping[str, Any]) -> Optional[User]:
        """Merge ``fields`` into the user. Values are stored as given.

        The tier is not recomputed here; points changes go through ``add_points``.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            user = _merge(user, fields)
            self._users[user_id] = user
        return user

    # Parking lots

    def get_parking_lots(self) -> List[ParkingLot]:
        return list(self._parking_lots.values())

    def get_parking_lot(self, lot_id: str) -> Optional[ParkingLot]:
        return self._parking_lots.get(lot_id)

    def get_parking_lots_by_owner(self, owner_id: str) -> List[ParkingLot]:
        return [lot for lot in self._parking_lots.values() if lot.owner_id == owner_id]

    def create_parking_lot(self, data: Union[ParkingLotCreate, Mapping[str, Any]]) -> ParkingLot:
        """Register a lot.

        Current spots default to the capacities; the lot starts active and
        unrated. Lots without an owner belong to ``ANONYMOUS_OWNER_ID``.
        """
        if not isinstance(data, ParkingLotCreate):
            data = ParkingLotCreate.model_validate(data)

        payload = data.model_dump()
        if payload["current_motorcycle_spots"] is None:
            payload["current_motorcycle_spots"] = data.motorcycle_capacity
        if payload["current_car_spots"] is None:
            payload["current_car_spots"] = data.car_capacity
        payload["owner_id"] = data.owner_id or ANONYMOUS_OWNER_ID

        lot = ParkingLot(
            id=new_id(),
            rating="0",
            total_reviews=0,
            status="active",
            created_at=self._clock(),
            **payload,
        )
        with self._lock:
            self._parking_lots[lot.id] = lot

        logger.info(f"Created parking lot {lot.id} ({lot.name}) for owner {lot.owner_id}")
        return lot

    def update_parking_lot(self, lot_id: str, fields: Mapping[str, Any]) -> Optional[ParkingLot]:
        with self._lock:
            lot = self._parking_lots.get(lot_id)
            if lot is None:
                return None
            lot = _merge(lot, fields)
            self._parking_lots[lot_id] = lot
        return lot

    def search_parking_lots(
        self, filters: Union[ParkingLotSearch, Mapping[str, Any], None] = None
    ) -> List[ParkingLot]:
        """Active lots matching every given filter."""
        if filters is None:
            filters = ParkingLotSearch()
        elif not isinstance(filters, ParkingLotSearch):
            filters = ParkingLotSearch.model_validate(filters)
        return filter_parking_lots(self._parking_lots.values(), filters)

    # Reviews

    def get_reviews_by_parking_lot(self, lot_id: str) -> List[Review]:
        return [r for r in self._reviews.values() if r.parking_lot_id == lot_id]

    def create_review(self, data: Union[ReviewCreate, Mapping[str, Any]]) -> Review:
        """Store a review and refresh the lot's rating and review count.

        A review for an unknown lot is stored without touching any lot.
        """
        if not isinstance(data, ReviewCreate):
            data = ReviewCreate.model_validate(data)

        with self._lock:
            review = Review(id=new_id(), created_at=self._clock(), **data.model_dump())
            self._reviews[review.id] = review

            lot = self._parking_lots.get(review.parking_lot_id)
            if lot is not None:
                ratings = [r.rating for r in self.get_reviews_by_parking_lot(lot.id)]
                self._parking_lots[lot.id] = lot.model_copy(
                    update={"rating": average_rating(ratings), "total_reviews": len(ratings)}
                )
            else:
                logger.debug(f"Review {review.id} refers to unknown parking lot {review.parking_lot_id}")

        return review

    # Community updates

    def get_community_updates(self, limit: int = 50) -> List[CommunityUpdate]:
        """Most recent updates first."""
        updates = sorted(
            self._community_updates.values(), key=lambda u: u.created_at, reverse=True
        )
        return updates[: max(limit, 0)]

    def create_community_update(
        self, data: Union[CommunityUpdateCreate, Mapping[str, Any]]
    ) -> CommunityUpdate:
        """Append an update to the feed and reward its author."""
        if not isinstance(data, CommunityUpdateCreate):
            data = CommunityUpdateCreate.model_validate(data)

        with self._lock:
            update = CommunityUpdate(
                id=new_id(),
                points_earned=COMMUNITY_UPDATE_POINTS,
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._community_updates[update.id] = update
            self.add_points(
                update.user_id,
                COMMUNITY_UPDATE_POINTS,
                "status_update",
                "Parking lot status update",
            )

        return update

    # Rewards

    def get_rewards(self) -> List[Reward]:
        """Active catalog entries."""
        return [reward for reward in self._rewards.values() if reward.is_active]

    def get_reward(self, reward_id: str) -> Optional[Reward]:
        return self._rewards.get(reward_id)

    def create_reward(self, data: Union[RewardCreate, Mapping[str, Any]]) -> Reward:
        if not isinstance(data, RewardCreate):
            data = RewardCreate.model_validate(data)

        reward = Reward(id=new_id(), **data.model_dump())
        with self._lock:
            self._rewards[reward.id] = reward
        return reward

    def get_user_rewards(self, user_id: str) -> List[UserReward]:
        return [r for r in self._user_rewards.values() if r.user_id == user_id]

    def redeem_reward(self, user_id: str, reward_id: str) -> UserReward:
        """Exchange points for a reward.

        Deducts exactly the reward cost and records the redemption, or raises
        NotFoundError / InsufficientPointsError and changes nothing.
        """
        with self._lock:
            reward = self._rewards.get(reward_id)
            user = self._users.get(user_id)
            if reward is None or user is None:
                logger.warning(f"Redeem failed: user {user_id} or reward {reward_id} not found")
                raise NotFoundError("Reward or user not found")

            if user.points < reward.points_cost:
                logger.warning(
                    f"Redeem failed: user {user_id} has {user.points} points, "
                    f"reward {reward_id} costs {reward.points_cost}"
                )
                raise InsufficientPointsError(reward.points_cost, user.points)

            self.add_points(user_id, -reward.points_cost, "reward_redemption", reward.name)

            redemption = UserReward(
                id=new_id(),
                user_id=user_id,
                reward_id=reward_id,
                redeemed_at=self._clock(),
            )
            self._user_rewards[redemption.id] = redemption

        logger.info(f"User {user_id} redeemed reward {reward_id} ({reward.name})")
        return redemption

    # Points

    def get_points_history(self, user_id: str) -> List[PointsHistory]:
        """Ledger of a user, most recent first."""
        entries = [h for h in self._points_history.values() if h.user_id == user_id]
        return sorted(entries, key=lambda h: h.created_at, reverse=True)

    def add_points(
        self,
        user_id: str,
        points: int,
        activity: str,
        description: Optional[str] = None,
    ) -> Optional[PointsHistory]:
        """Apply a points delta, recompute the tier and append a ledger entry.

        The balance never drops below zero, but the ledger keeps the requested
        delta, so the ledger sum can exceed the balance after a clamp.
        Unknown users are ignored and None is returned.
        """
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                logger.debug(f"Ignoring {points} points for unknown user {user_id}")
                return None

            new_points = max(0, user.points + points)
            self._users[user_id] = user.model_copy(
                update={"points": new_points, "member_tier": tier_for_points(new_points)}
            )

            entry = PointsHistory(
                id=new_id(),
                user_id=user_id,
                points=points,
                activity=activity,
                description=description,
                created_at=self._clock(),
            )
            self._points_history[entry.id] = entry

        logger.info(f"User {user_id}: {points:+d} points for {activity}, balance {new_points}")
        return entry
