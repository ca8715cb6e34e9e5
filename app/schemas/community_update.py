"""CommunityUpdate schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CommunityUpdateBase(BaseModel):
    """Base community update schema."""

    parking_lot_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    status: str = Field(..., pattern="^(available|full|almost_full)$")
    comment: Optional[str] = None


class CommunityUpdateCreate(CommunityUpdateBase):
    """Schema for posting a community update.

    Points are fixed server-side; a client-sent ``points_earned`` is ignored.
    """

    pass


class CommunityUpdateResponse(CommunityUpdateBase):
    """Schema for community update response."""

    id: str
    points_earned: int
    created_at: datetime

    model_config = {"from_attributes": True}
