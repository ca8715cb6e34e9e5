"""API dependencies."""

from fastapi import Request

from app.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """Return the store owned by the running application."""
    return request.app.state.store
