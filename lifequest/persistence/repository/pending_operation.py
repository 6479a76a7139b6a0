"""PostgreSQL implementation of PendingOperation repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifequest.domain.model import PendingOperation
from lifequest.domain.repository import PendingOperationRepository
from lifequest.domain.value import OperationId, UserId
from lifequest.persistence.mappers import (
    pending_operation_to_dict,
    row_to_pending_operation,
)
from lifequest.persistence.tables import pending_operations_table


class PostgresPendingOperationRepository(PendingOperationRepository):
    """PostgreSQL implementation of PendingOperationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, operation_id: OperationId) -> Optional[PendingOperation]:
        """Find an operation by ID."""
        stmt = select(pending_operations_table).where(
            pending_operations_table.c.id == operation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_pending_operation(dict(row)) if row else None

    async def find_pending(
        self, user_id: Optional[UserId] = None, limit: int = 100
    ) -> List[PendingOperation]:
        """Find unapplied operations in insertion order."""
        stmt = (
            select(pending_operations_table)
            .where(pending_operations_table.c.applied_at.is_(None))
            .order_by(pending_operations_table.c.seq)
            .limit(limit)
        )
        if user_id is not None:
            stmt = stmt.where(pending_operations_table.c.user_id == user_id)

        result = await self.session.execute(stmt)
        return [row_to_pending_operation(dict(row)) for row in result.mappings().all()]

    async def count_pending(self, user_id: Optional[UserId] = None) -> int:
        """Count unapplied operations."""
        stmt = (
            select(func.count())
            .select_from(pending_operations_table)
            .where(pending_operations_table.c.applied_at.is_(None))
        )
        if user_id is not None:
            stmt = stmt.where(pending_operations_table.c.user_id == user_id)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, operation: PendingOperation) -> PendingOperation:
        """Save an operation (create or update)."""
        operation_dict = pending_operation_to_dict(operation)

        if await self.find_by_id(operation.id):
            stmt = (
                update(pending_operations_table)
                .where(pending_operations_table.c.id == operation.id)
                .values(**operation_dict)
            )
        else:
            stmt = insert(pending_operations_table).values(**operation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return operation

    async def purge_applied(self, applied_before: datetime) -> int:
        """Delete operations applied before the cutoff."""
        stmt = delete(pending_operations_table).where(
            pending_operations_table.c.applied_at.is_not(None),
            pending_operations_table.c.applied_at < applied_before,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
