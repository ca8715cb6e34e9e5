"""Review model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Review(BaseModel):
    """User review of a parking lot."""

    model_config = ConfigDict(frozen=True)

    id: str
    parking_lot_id: str
    user_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None
    created_at: datetime

    def __repr__(self):
        return f"<Review(id={self.id}, parking_lot_id={self.parking_lot_id}, rating={self.rating})>"
