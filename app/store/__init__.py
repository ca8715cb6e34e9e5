"""In-memory store package."""

from app.store.exceptions import (
    BusinessRuleError,
    ConflictError,
    DuplicateEmailError,
    DuplicateUsernameError,
    InsufficientPointsError,
    NotFoundError,
    StoreError,
)
from app.store.memory import ANONYMOUS_OWNER_ID, MemoryStore

__all__ = [
    "ANONYMOUS_OWNER_ID",
    "BusinessRuleError",
    "ConflictError",
    "DuplicateEmailError",
    "DuplicateUsernameError",
    "InsufficientPointsError",
    "MemoryStore",
    "NotFoundError",
    "StoreError",
]
