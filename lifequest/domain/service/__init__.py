"""Domain services for LifeQuest."""

from .base import Service
from .boss_service import BossService
from .journal_service import JournalDeletion, JournalService
from .progression_engine import ProgressionEngine
from .quest_service import QuestOutcome, QuestService
from .reward_service import RewardService
from .sync_service import (
    RemoteStore,
    ReplayResult,
    SyncService,
)

__all__ = [
    "Service",
    "ProgressionEngine",
    "QuestService",
    "QuestOutcome",
    "BossService",
    "RewardService",
    "JournalService",
    "JournalDeletion",
    "SyncService",
    "RemoteStore",
    "ReplayResult",
]
