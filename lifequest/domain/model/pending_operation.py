"""Pending operation entity for the write-ahead sync log."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from lifequest.domain.model.common import DomainModel
from lifequest.domain.value import OperationId, OperationKind, UserId


class PendingOperation(DomainModel):
    """A document write waiting to be replayed against the remote store.

    The id is generated client-side so the remote store can acknowledge
    duplicates without applying them twice.
    """

    id: OperationId
    user_id: UserId
    kind: OperationKind
    collection: str
    key: str
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    attempts: int = Field(default=0, ge=0)
    last_error: Optional[str] = None
    applied_at: Optional[datetime] = None

    @property
    def is_applied(self) -> bool:
        """Whether the remote store acknowledged this operation."""
        return self.applied_at is not None
