"""Sync use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from lifequest.domain.service import SyncService
from lifequest.domain.value import UserId


class ReplaySyncRequest(BaseModel):
    """Replay sync request. Omit the user to replay every user's log."""

    user_id: Optional[UUID] = None
    limit: int = Field(default=100, ge=1, le=1000)


class ReplaySyncResponse(BaseModel):
    """Replay sync response."""

    online: bool
    applied: int
    failed_operation_id: Optional[UUID] = None
    error: Optional[str] = None
    remaining: int
    purged: int = 0


class ReplaySyncUseCase:
    """Use case for pushing queued operations to the remote store."""

    def __init__(self, sync_service: SyncService) -> None:
        """Initialize replay sync use case.

        Args:
            sync_service: Sync domain service
        """
        self.sync_service = sync_service

    async def execute(self, request: ReplaySyncRequest) -> ReplaySyncResponse:
        """Replay pending operations in order, stopping at the first failure."""
        result = await self.sync_service.replay(
            user_id=UserId(request.user_id) if request.user_id else None,
            limit=request.limit,
        )
        return ReplaySyncResponse(
            online=result.online,
            applied=len(result.applied),
            failed_operation_id=result.failed.id if result.failed else None,
            error=result.failed.last_error if result.failed else None,
            remaining=result.remaining,
            purged=result.purged,
        )


class GetSyncStatusRequest(BaseModel):
    """Get sync status request."""

    user_id: Optional[UUID] = None


class GetSyncStatusResponse(BaseModel):
    """Get sync status response."""

    online: bool
    pending: int


class GetSyncStatusUseCase:
    def __init__(self, sync_service: SyncService) -> None:
        self.sync_service = sync_service

    async def execute(self, request: GetSyncStatusRequest) -> GetSyncStatusResponse:
        return GetSyncStatusResponse(
            online=await self.sync_service.remote_store.is_online(),
            pending=await self.sync_service.pending_count(
                UserId(request.user_id) if request.user_id else None
            ),
        )
