"""Reward endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_store
from app.schemas.reward import RedeemRequest, RedeemResponse, RewardResponse
from app.store import MemoryStore, StoreError

router = APIRouter()


@router.get("", response_model=List[RewardResponse])
async def list_rewards(store: MemoryStore = Depends(get_store)):
    """Active reward catalog."""
    return store.get_rewards()


@router.post("/{reward_id}/redeem", response_model=RedeemResponse)
async def redeem_reward(
    reward_id: str,
    redeem_data: RedeemRequest,
    store: MemoryStore = Depends(get_store),
):
    """Exchange a user's points for a reward."""
    if not redeem_data.user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User ID is required",
        )

    try:
        redemption = store.redeem_reward(redeem_data.user_id, reward_id)
    except StoreError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    return {"message": "Reward redeemed successfully", "redemption": redemption}
