"""Repository interfaces for the LifeQuest domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from lifequest.domain.repository.boss import BossRepository
from lifequest.domain.repository.journal import JournalRepository
from lifequest.domain.repository.pending_operation import PendingOperationRepository
from lifequest.domain.repository.task import TaskRepository
from lifequest.domain.repository.user_state import UserStateRepository

__all__ = [
    "UserStateRepository",
    "TaskRepository",
    "BossRepository",
    "JournalRepository",
    "PendingOperationRepository",
]
