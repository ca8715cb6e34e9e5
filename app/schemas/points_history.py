"""PointsHistory schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PointsHistoryResponse(BaseModel):
    """Schema for a ledger entry."""

    id: str
    user_id: str
    points: int
    activity: str
    description: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}
