"""CommunityUpdate endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.deps import get_store
from app.config import settings
from app.schemas.community_update import CommunityUpdateCreate, CommunityUpdateResponse
from app.store import MemoryStore

router = APIRouter()


@router.get("", response_model=List[CommunityUpdateResponse])
async def list_community_updates(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Max number of updates"),
    store: MemoryStore = Depends(get_store),
):
    """Recent community updates, newest first."""
    return store.get_community_updates(limit or settings.COMMUNITY_FEED_LIMIT)


@router.post("", response_model=CommunityUpdateResponse, status_code=status.HTTP_201_CREATED)
async def create_community_update(
    update_data: CommunityUpdateCreate,
    store: MemoryStore = Depends(get_store),
):
    """Post a status report for a parking lot."""
    return store.create_community_update(update_data)
