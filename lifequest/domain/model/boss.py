"""Weekly boss entity."""

from typing import Optional

from pydantic import Field, field_validator

from lifequest.domain.model.common import DomainModel
from lifequest.domain.value import BossId, BossRewards, TaskCategory, UserId


class Boss(DomainModel):
    """Weekly adversary damaged by completing categorized quests.

    Resistances map a category to a damage divisor: 1.0 is neutral,
    above 1.0 resists and below 1.0 is a weakness.
    """

    id: BossId
    user_id: UserId
    name: str
    title: str = ""
    max_hp: int = Field(gt=0)
    current_hp: int = Field(ge=0)
    resistances: dict[TaskCategory, float] = Field(default_factory=dict)
    rewards: BossRewards = Field(default_factory=BossRewards)
    last_defeated_week: Optional[int] = None

    @field_validator("resistances")
    @classmethod
    def validate_resistances(
        cls, v: dict[TaskCategory, float]
    ) -> dict[TaskCategory, float]:
        """Resistance multipliers must be positive."""
        for category, multiplier in v.items():
            if multiplier <= 0:
                raise ValueError(f"Resistance for {category.value} must be positive")
        return v

    @property
    def is_defeated(self) -> bool:
        """Whether the boss has no HP left."""
        return self.current_hp <= 0
