"""User model."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Registered member - collects points and redeems rewards."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    email: str
    # Stored as given, never rendered in responses
    password: str
    full_name: str
    phone: Optional[str] = None
    vehicle_type: str = Field(default="motorcycle", pattern="^(motorcycle|car|both)$")
    points: int = Field(default=0, ge=0)
    member_tier: str = Field(default="bronze", pattern="^(bronze|silver|gold)$")
    created_at: datetime

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, points={self.points})>"
