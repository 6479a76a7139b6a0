"""User state aggregate root.

One UserState exists per account. It is the single snapshot the progression
engine reads and replaces on every mutation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from lifequest.domain.model.common import DomainModel
from lifequest.domain.model.reward import Item, RewardItem
from lifequest.domain.value import (
    DebuffEffect,
    NotificationId,
    NotificationType,
    RewardId,
    UserId,
)


class Skill(DomainModel):
    """A purchasable skill inside a skill tree."""

    name: str
    description: str = ""
    level: int = Field(default=0, ge=0)
    max_level: int = Field(ge=1)
    cost: int = Field(default=1, ge=0)

    @model_validator(mode="after")
    def check_level(self) -> "Skill":
        """Skill level may not exceed its maximum."""
        if self.level > self.max_level:
            raise ValueError("Skill level cannot exceed max_level")
        return self


class SkillTree(DomainModel):
    """Named group of skills (Strength, Endurance, ...)."""

    name: str
    description: str = ""
    skills: list[Skill] = Field(default_factory=list)


class Debuff(DomainModel):
    """Timed negative modifier. Duration counts remaining days."""

    name: str
    description: str = ""
    duration: int = Field(ge=0)
    effect: Optional[DebuffEffect] = None


class RedeemedReward(DomainModel):
    """Append-only redemption log for one reward."""

    reward_id: RewardId
    timestamps: list[datetime] = Field(default_factory=list)


class RecentJournalDeletions(DomainModel):
    """Counter of rapid journal deletions used for the penalty backoff."""

    count: int = Field(default=0, ge=0)
    last_deletion: Optional[datetime] = None


class Notification(DomainModel):
    """User-facing message produced by an engine side effect."""

    id: NotificationId
    type: NotificationType = NotificationType.GENERIC
    title: str
    message: str = ""
    date: datetime
    read: bool = False


class UserState(DomainModel):
    """User progression snapshot.

    Invariants:
    - 0 <= health <= max_health
    - coins >= 0 and gems >= 0
    - longest_streak >= streak
    - xp < xp_to_next_level below the level cap
    """

    id: UserId
    name: str = "Adventurer"

    level: int = Field(default=1, ge=0)
    xp: int = Field(default=0, ge=0)
    xp_to_next_level: int = Field(gt=0)
    skill_points: int = Field(default=0, ge=0)

    health: int = Field(default=100, ge=0)
    max_health: int = Field(default=100, gt=0)

    coins: int = Field(default=0, ge=0)
    gems: int = Field(default=0, ge=0)

    streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)
    tasks_completed: int = Field(default=0, ge=0)

    debuffs: list[Debuff] = Field(default_factory=list)
    skill_trees: list[SkillTree] = Field(default_factory=list)
    inventory: list[Item] = Field(default_factory=list)
    redeemed_rewards: list[RedeemedReward] = Field(default_factory=list)
    custom_rewards: list[RewardItem] = Field(default_factory=list)
    recent_journal_deletions: RecentJournalDeletions = Field(
        default_factory=RecentJournalDeletions
    )
    notifications: list[Notification] = Field(default_factory=list)

    member_since: datetime = Field(default_factory=datetime.now)
    last_login: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_invariants(self) -> "UserState":
        """Validate cross-field invariants."""
        if self.health > self.max_health:
            raise ValueError("health cannot exceed max_health")
        if self.longest_streak < self.streak:
            raise ValueError("longest_streak cannot be lower than streak")
        return self
