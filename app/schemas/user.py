"""User schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserBase(BaseModel):
    """Base user schema."""

    username: str = Field(..., min_length=1, max_length=64)
    email: EmailStr
    full_name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    vehicle_type: str = Field(default="motorcycle", pattern="^(motorcycle|car|both)$")


class UserCreate(UserBase):
    """Schema for registering a user."""

    password: str = Field(..., min_length=1)


class UserUpdate(BaseModel):
    """Schema for updating a user profile.

    Points and member tier only change through points activity.
    """

    username: Optional[str] = Field(None, min_length=1, max_length=64)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=1)
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    vehicle_type: Optional[str] = Field(None, pattern="^(motorcycle|car|both)$")

    @field_validator("username", "email", "password", "full_name", "vehicle_type", mode="before")
    @classmethod
    def not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class UserResponse(BaseModel):
    """Schema for user response."""

    id: str
    username: str
    email: str
    full_name: str
    phone: Optional[str]
    vehicle_type: str
    points: int
    member_tier: str
    created_at: datetime

    model_config = {"from_attributes": True}
