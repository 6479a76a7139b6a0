"""Write-ahead sync log and replay against the remote document store."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from uuid import uuid4

import logfire

from lifequest.domain.error import SyncError
from lifequest.domain.model import PendingOperation
from lifequest.domain.model.common import DomainModel
from lifequest.domain.repository import PendingOperationRepository
from lifequest.domain.value import OperationId, OperationKind, UserId

from .base import Service

# Remote collection names
USERS = "users"
TASKS = "tasks"
BOSSES = "bosses"
JOURNAL = "journal"


class RemoteStore(ABC):
    """Remote document store the pending-operation log is replayed against.

    Implementations must treat the operation id as an idempotency key:
    an id that was already applied is acknowledged without re-applying.
    """

    @abstractmethod
    async def is_online(self) -> bool:
        """Whether the remote store is currently reachable."""
        pass

    @abstractmethod
    async def apply(self, operation: PendingOperation) -> None:
        """Apply one operation remotely.

        Args:
            operation: The operation to apply

        Raises:
            SyncError: If the store rejected or could not receive the operation
        """
        pass


@dataclass(frozen=True)
class ReplayResult:
    """Outcome of one replay pass.

    ``failed`` is the operation left at the head of the queue, if any.
    """

    online: bool
    applied: list[PendingOperation] = field(default_factory=list)
    failed: Optional[PendingOperation] = None
    remaining: int = 0
    purged: int = 0


class SyncService(Service):
    """Domain service owning the pending-operation log."""

    def __init__(
        self,
        pending_operation_repository: PendingOperationRepository,
        remote_store: RemoteStore,
        applied_retention: timedelta = timedelta(days=7),
    ) -> None:
        """Initialize sync service.

        Args:
            pending_operation_repository: Pending operation repository
            remote_store: Remote document store
            applied_retention: How long applied operations stay in the log
        """
        self.pending_operation_repository = pending_operation_repository
        self.remote_store = remote_store
        self.applied_retention = applied_retention

    async def record(
        self,
        user_id: UserId,
        kind: OperationKind,
        collection: str,
        key: str,
        payload: dict[str, Any],
        now: datetime,
        operation_id: Optional[OperationId] = None,
    ) -> PendingOperation:
        """Append an operation to the log.

        Recording an id that is already in the log returns the stored
        operation unchanged.

        Args:
            user_id: Owner of the written document
            kind: Put or delete
            collection: Remote collection name
            key: Document key within the collection
            payload: Document body (empty for deletes)
            now: Creation time, used for replay order
            operation_id: Client-generated id (generated when omitted)

        Returns:
            The recorded operation
        """
        if operation_id is not None:
            existing = await self.pending_operation_repository.find_by_id(operation_id)
            if existing:
                logfire.info(
                    "Operation already recorded", operation_id=str(operation_id)
                )
                return existing

        operation = PendingOperation(
            id=operation_id or OperationId(uuid4()),
            user_id=user_id,
            kind=kind,
            collection=collection,
            key=key,
            payload=payload,
            created_at=now,
        )
        saved = await self.pending_operation_repository.save(operation)
        logfire.info(
            "Operation recorded",
            operation_id=str(saved.id),
            kind=kind.value,
            collection=collection,
            key=key,
        )
        return saved

    async def record_put(
        self,
        user_id: UserId,
        collection: str,
        key: str,
        document: DomainModel,
        now: datetime,
    ) -> PendingOperation:
        """Record a full-document write."""
        return await self.record(
            user_id=user_id,
            kind=OperationKind.PUT,
            collection=collection,
            key=key,
            payload=document.model_dump(mode="json"),
            now=now,
        )

    async def record_delete(
        self, user_id: UserId, collection: str, key: str, now: datetime
    ) -> PendingOperation:
        """Record a document deletion."""
        return await self.record(
            user_id=user_id,
            kind=OperationKind.DELETE,
            collection=collection,
            key=key,
            payload={},
            now=now,
        )

    async def pending_count(self, user_id: Optional[UserId] = None) -> int:
        """Number of operations still waiting for the remote store."""
        return await self.pending_operation_repository.count_pending(user_id)

    async def purge_applied(self, now: Optional[datetime] = None) -> int:
        """Delete applied operations older than the retention window.

        Applied operations are kept for a while so a re-sent operation id is
        still recognised by ``record``.

        Returns:
            Number of deleted operations
        """
        cutoff = (now or datetime.now(timezone.utc)) - self.applied_retention
        purged = await self.pending_operation_repository.purge_applied(cutoff)
        if purged:
            logfire.info("Applied operations purged", purged=purged)
        return purged

    async def replay(
        self,
        user_id: Optional[UserId] = None,
        limit: int = 100,
        now: Optional[datetime] = None,
    ) -> ReplayResult:
        """Send pending operations to the remote store in creation order.

        Replay stops at the first failure. The failed operation stays at the
        head of the queue with its attempt count raised, so later operations
        are never applied before it.

        Args:
            user_id: Only replay this user's operations (None for all)
            limit: Maximum number of operations to send
            now: Time recorded as the applied timestamp

        Returns:
            Replay outcome
        """
        with logfire.span(
            "sync_service.replay",
            user_id=str(user_id) if user_id else None,
            limit=limit,
        ):
            if not await self.remote_store.is_online():
                remaining = await self.pending_count(user_id)
                logfire.info("Remote store offline, replay skipped", remaining=remaining)
                return ReplayResult(online=False, remaining=remaining)

            pending = await self.pending_operation_repository.find_pending(
                user_id=user_id, limit=limit
            )
            applied: list[PendingOperation] = []
            failed: Optional[PendingOperation] = None

            for operation in pending:
                try:
                    await self.remote_store.apply(operation)
                except SyncError as e:
                    failed = await self.pending_operation_repository.save(
                        operation.model_copy(
                            update={
                                "attempts": operation.attempts + 1,
                                "last_error": str(e),
                            }
                        )
                    )
                    logfire.warn(
                        "Operation replay failed",
                        operation_id=str(operation.id),
                        attempts=failed.attempts,
                        error=str(e),
                    )
                    break

                applied_at = now or datetime.now(timezone.utc)
                applied.append(
                    await self.pending_operation_repository.save(
                        operation.model_copy(
                            update={
                                "attempts": operation.attempts + 1,
                                "last_error": None,
                                "applied_at": applied_at,
                            }
                        )
                    )
                )

            purged = await self.purge_applied(now)
            remaining = await self.pending_count(user_id)
            logfire.info(
                "Replay finished",
                applied=len(applied),
                purged=purged,
                failed=str(failed.id) if failed else None,
                remaining=remaining,
            )
            return ReplayResult(
                online=True,
                applied=applied,
                failed=failed,
                remaining=remaining,
                purged=purged,
            )
