"""In-memory pending operation repository for testing."""

from datetime import datetime
from typing import List, Optional

from lifequest.domain.model import PendingOperation
from lifequest.domain.repository import PendingOperationRepository
from lifequest.domain.value import OperationId, UserId


class InMemoryPendingOperationRepository(PendingOperationRepository):
    """In-memory implementation of PendingOperationRepository for testing.

    Dict insertion order is the replay order; updates keep their slot.
    """

    def __init__(self) -> None:
        self._operations: dict[OperationId, PendingOperation] = {}

    async def find_by_id(self, operation_id: OperationId) -> Optional[PendingOperation]:
        """Find an operation by ID."""
        return self._operations.get(operation_id)

    def _pending(self, user_id: Optional[UserId]) -> List[PendingOperation]:
        return [
            op
            for op in self._operations.values()
            if not op.is_applied and (user_id is None or op.user_id == user_id)
        ]

    async def find_pending(
        self, user_id: Optional[UserId] = None, limit: int = 100
    ) -> List[PendingOperation]:
        """Find unapplied operations in insertion order."""
        return self._pending(user_id)[:limit]

    async def count_pending(self, user_id: Optional[UserId] = None) -> int:
        """Count unapplied operations."""
        return len(self._pending(user_id))

    async def save(self, operation: PendingOperation) -> PendingOperation:
        """Save an operation (create or update)."""
        self._operations[operation.id] = operation
        return operation

    async def purge_applied(self, applied_before: datetime) -> int:
        """Delete operations applied before the cutoff."""
        purged = [
            op.id
            for op in self._operations.values()
            if op.applied_at is not None and op.applied_at < applied_before
        ]
        for operation_id in purged:
            del self._operations[operation_id]
        return len(purged)
