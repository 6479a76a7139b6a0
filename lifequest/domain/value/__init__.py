"""Domain value objects for LifeQuest."""

from lifequest.domain.value.identifiers import (
    BossId,
    ItemId,
    JournalEntryId,
    NotificationId,
    OperationId,
    RewardId,
    TaskId,
    UserId,
)
from lifequest.domain.value.types import (
    BossRewards,
    DebuffEffect,
    Difficulty,
    EffectKind,
    HitKind,
    ItemType,
    NotificationType,
    OperationKind,
    Rarity,
    RedeemPeriod,
    RewardCategory,
    TaskCategory,
    TaskType,
)

__all__ = [
    # Identifiers
    "UserId",
    "TaskId",
    "BossId",
    "JournalEntryId",
    "NotificationId",
    "OperationId",
    "RewardId",
    "ItemId",
    # Types
    "TaskCategory",
    "Difficulty",
    "TaskType",
    "RedeemPeriod",
    "EffectKind",
    "ItemType",
    "Rarity",
    "RewardCategory",
    "NotificationType",
    "HitKind",
    "OperationKind",
    "DebuffEffect",
    "BossRewards",
]
