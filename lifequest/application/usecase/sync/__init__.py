"""Sync use cases."""

from .replay_sync import (
    GetSyncStatusRequest,
    GetSyncStatusResponse,
    GetSyncStatusUseCase,
    ReplaySyncRequest,
    ReplaySyncResponse,
    ReplaySyncUseCase,
)

__all__ = [
    "GetSyncStatusRequest",
    "GetSyncStatusResponse",
    "GetSyncStatusUseCase",
    "ReplaySyncRequest",
    "ReplaySyncResponse",
    "ReplaySyncUseCase",
]
