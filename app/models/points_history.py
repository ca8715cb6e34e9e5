"""PointsHistory model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PointsHistory(BaseModel):
    """Ledger row for a points-affecting activity.

    ``points`` is the requested delta: positive when earned, negative when spent.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    points: int
    activity: str
    description: Optional[str] = None
    created_at: datetime
