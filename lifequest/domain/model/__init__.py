"""Domain model entities for LifeQuest."""

from lifequest.domain.model.boss import Boss
from lifequest.domain.model.journal import JournalEntry
from lifequest.domain.model.pending_operation import PendingOperation
from lifequest.domain.model.reward import Item, RewardItem
from lifequest.domain.model.task import Task
from lifequest.domain.model.user import (
    Debuff,
    Notification,
    RecentJournalDeletions,
    RedeemedReward,
    Skill,
    SkillTree,
    UserState,
)

__all__ = [
    "UserState",
    "Skill",
    "SkillTree",
    "Debuff",
    "Notification",
    "RedeemedReward",
    "RecentJournalDeletions",
    "Task",
    "Boss",
    "Item",
    "RewardItem",
    "JournalEntry",
    "PendingOperation",
]
