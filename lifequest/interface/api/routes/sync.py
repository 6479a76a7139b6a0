"""Sync routes for the pending-operation log."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from lifequest.application.usecase.sync import (
    GetSyncStatusRequest,
    GetSyncStatusResponse,
    GetSyncStatusUseCase,
    ReplaySyncRequest,
    ReplaySyncResponse,
    ReplaySyncUseCase,
)

router = APIRouter(prefix="/sync", tags=["sync"], route_class=DishkaRoute)


@router.post("/replay", response_model=ReplaySyncResponse)
async def replay(
    replay_sync_use_case: FromDishka[ReplaySyncUseCase],
    user_id: Optional[UUID] = None,
    limit: int = Query(default=100, ge=1, le=1000),
) -> ReplaySyncResponse:
    """Push queued operations to the remote store in order.

    Replay stops at the first failure; the failed operation is retried
    first on the next call. While the store is offline nothing is sent.
    """
    return await replay_sync_use_case.execute(
        ReplaySyncRequest(user_id=user_id, limit=limit)
    )


@router.get("/status", response_model=GetSyncStatusResponse)
async def sync_status(
    get_sync_status_use_case: FromDishka[GetSyncStatusUseCase],
    user_id: Optional[UUID] = None,
) -> GetSyncStatusResponse:
    """Report whether the remote store is reachable and how much is queued."""
    return await get_sync_status_use_case.execute(GetSyncStatusRequest(user_id=user_id))
