"""Test configuration and shared builders."""

from datetime import datetime, timezone
from uuid import uuid4

from lifequest.domain.model import Boss, Task, UserState
from lifequest.domain.rules.defaults import create_default_user
from lifequest.domain.value import (
    BossId,
    BossRewards,
    Difficulty,
    TaskCategory,
    TaskId,
    TaskType,
    UserId,
)

# A Wednesday, far from week and year boundaries
NOW = datetime(2025, 6, 11, 12, 0, tzinfo=timezone.utc)


def make_user(**overrides) -> UserState:
    """Default new-account state with field overrides."""
    state = create_default_user(UserId(uuid4()), overrides.pop("now", NOW))
    return state.model_copy(update=overrides)


def make_task(user_id: UserId | None = None, **overrides) -> Task:
    """A one-time Education quest worth 10 XP and 5 coins."""
    fields = {
        "id": TaskId(uuid4()),
        "user_id": user_id or UserId(uuid4()),
        "title": "Read a chapter",
        "category": TaskCategory.EDUCATION,
        "difficulty": Difficulty.EASY,
        "type": TaskType.ONE_TIME,
        "xp": 10,
        "coins": 5,
        "created_at": NOW,
    }
    fields.update(overrides)
    return Task(**fields)


def make_boss(user_id: UserId | None = None, **overrides) -> Boss:
    """A 500 HP boss weak to Education and resistant to Health."""
    fields = {
        "id": BossId(uuid4()),
        "user_id": user_id or UserId(uuid4()),
        "name": "Procrastination Dragon",
        "max_hp": 500,
        "current_hp": 500,
        "resistances": {TaskCategory.EDUCATION: 0.5, TaskCategory.HEALTH: 2.0},
        "rewards": BossRewards(xp=100, coins=50, gems=5),
    }
    fields.update(overrides)
    return Boss(**fields)
