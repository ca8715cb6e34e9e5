"""CommunityUpdate model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CommunityUpdate(BaseModel):
    """Crowd-sourced availability report for a parking lot.

    Informational only: posting one never changes the lot's spot counts.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    parking_lot_id: str
    user_id: str
    status: str = Field(..., pattern="^(available|full|almost_full)$")
    comment: Optional[str] = None
    points_earned: int
    created_at: datetime

    def __repr__(self):
        return f"<CommunityUpdate(id={self.id}, status={self.status})>"
