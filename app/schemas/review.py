"""Review schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ReviewBase(BaseModel):
    """Base review schema."""

    parking_lot_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewCreate(ReviewBase):
    """Schema for creating a review."""

    pass


class ReviewResponse(ReviewBase):
    """Schema for review response."""

    id: str
    created_at: datetime

    model_config = {"from_attributes": True}
