"""Pending operation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from lifequest.domain.model.pending_operation import PendingOperation
from lifequest.domain.value import OperationId, UserId


class PendingOperationRepository(ABC):
    """Write-ahead log of document writes awaiting remote replay."""

    @abstractmethod
    async def find_by_id(self, operation_id: OperationId) -> Optional[PendingOperation]:
        """Find an operation by ID.

        Args:
            operation_id: The client-generated operation ID

        Returns:
            The operation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending(
        self, user_id: Optional[UserId] = None, limit: int = 100
    ) -> List[PendingOperation]:
        """Find operations not yet applied remotely, oldest first.

        Args:
            user_id: Restrict to one user's operations (None for all)
            limit: Maximum number of operations

        Returns:
            Pending operations in creation order
        """
        pass

    @abstractmethod
    async def count_pending(self, user_id: Optional[UserId] = None) -> int:
        """Count operations not yet applied remotely.

        Args:
            user_id: Restrict to one user's operations (None for all)

        Returns:
            Number of pending operations
        """
        pass

    @abstractmethod
    async def purge_applied(self, applied_before: datetime) -> int:
        """Delete operations the remote store acknowledged before a cutoff.

        Args:
            applied_before: Operations applied earlier than this are deleted

        Returns:
            Number of deleted operations
        """
        pass

    @abstractmethod
    async def save(self, operation: PendingOperation) -> PendingOperation:
        """Save an operation (create or update).

        Args:
            operation: The operation to save

        Returns:
            The saved operation
        """
        pass
