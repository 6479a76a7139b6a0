"""In-memory repository implementations for testing."""

from .boss import InMemoryBossRepository
from .journal import InMemoryJournalRepository
from .pending_operation import InMemoryPendingOperationRepository
from .task import InMemoryTaskRepository
from .user_state import InMemoryUserStateRepository

__all__ = [
    "InMemoryBossRepository",
    "InMemoryJournalRepository",
    "InMemoryPendingOperationRepository",
    "InMemoryTaskRepository",
    "InMemoryUserStateRepository",
]
