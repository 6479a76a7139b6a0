"""Task (quest) entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lifequest.domain.model.common import DomainModel
from lifequest.domain.value import Difficulty, TaskCategory, TaskId, TaskType, UserId


class Task(DomainModel):
    """A quest owned by a user.

    Completing a quest grants its xp and coins and damages the weekly boss.
    Recurring quests (Daily, Weekly, Monthly) keep a completion streak.
    """

    id: TaskId
    user_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = None
    intention: Optional[str] = None
    category: TaskCategory
    difficulty: Difficulty = Difficulty.NOT_APPLICABLE
    type: TaskType = TaskType.ONE_TIME
    completed: bool = False
    xp: int = Field(default=0, ge=0)
    coins: int = Field(default=0, ge=0)
    streak: int = Field(default=0, ge=0)
    last_completed: Optional[datetime] = None
    due_date: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
