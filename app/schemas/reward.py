"""Reward schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RewardBase(BaseModel):
    """Base reward schema."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str
    points_cost: int = Field(..., gt=0)
    category: str = Field(..., pattern="^(transport|food|fuel|other)$")
    icon: str
    is_active: bool = True


class RewardCreate(RewardBase):
    """Schema for adding a reward to the catalog."""

    pass


class RewardResponse(RewardBase):
    """Schema for reward response."""

    id: str

    model_config = {"from_attributes": True}


class RedeemRequest(BaseModel):
    """Body of a redeem call."""

    user_id: Optional[str] = None


class UserRewardResponse(BaseModel):
    """Schema for redemption record response."""

    id: str
    user_id: str
    reward_id: str
    redeemed_at: datetime

    model_config = {"from_attributes": True}


class RedeemResponse(BaseModel):
    """Schema for a successful redemption."""

    message: str
    redemption: UserRewardResponse
