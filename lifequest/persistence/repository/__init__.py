"""PostgreSQL repository implementations."""

from lifequest.persistence.repository.boss import PostgresBossRepository
from lifequest.persistence.repository.journal import PostgresJournalRepository
from lifequest.persistence.repository.pending_operation import (
    PostgresPendingOperationRepository,
)
from lifequest.persistence.repository.task import PostgresTaskRepository
from lifequest.persistence.repository.user_state import PostgresUserStateRepository

__all__ = [
    "PostgresUserStateRepository",
    "PostgresTaskRepository",
    "PostgresBossRepository",
    "PostgresJournalRepository",
    "PostgresPendingOperationRepository",
]
