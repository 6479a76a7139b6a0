"""Strongly typed identifiers for LifeQuest domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
TaskId = NewType("TaskId", UUID)
BossId = NewType("BossId", UUID)
JournalEntryId = NewType("JournalEntryId", UUID)
NotificationId = NewType("NotificationId", UUID)
OperationId = NewType("OperationId", UUID)

# Reward and item ids are catalogue slugs ("reward-1", "custom-...")
RewardId = NewType("RewardId", str)
ItemId = NewType("ItemId", str)
