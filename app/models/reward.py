"""Reward and UserReward models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Reward(BaseModel):
    """Catalog entry that can be bought with points."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    points_cost: int = Field(..., gt=0)
    category: str = Field(..., pattern="^(transport|food|fuel|other)$")
    icon: str
    is_active: bool = True

    def __repr__(self):
        return f"<Reward(id={self.id}, name={self.name}, points_cost={self.points_cost})>"


class UserReward(BaseModel):
    """Redemption record - one per successful redeem."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    reward_id: str
    redeemed_at: datetime
