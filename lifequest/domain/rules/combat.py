"""Boss combat: damage resolution against category resistances."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from lifequest.config import ProgressionSettings
from lifequest.domain.model import Boss, Task
from lifequest.domain.rules.calendar import week_number
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS
from lifequest.domain.value import BossRewards, Difficulty, HitKind

NEUTRAL_RESISTANCE = 1.0


def base_damage(
    difficulty: Difficulty, settings: ProgressionSettings = DEFAULT_SETTINGS
) -> int:
    """Damage a quest of the given difficulty deals before resistances."""
    return {
        Difficulty.EASY: settings.easy_damage,
        Difficulty.MEDIUM: settings.medium_damage,
        Difficulty.HARD: settings.hard_damage,
    }.get(difficulty, 0)


@dataclass(frozen=True)
class BossHit:
    """Outcome of hitting a boss with a completed quest.

    ``rewards_granted`` is set only on the hit that brings the boss from
    positive HP to 0.
    """

    boss: Boss
    damage: int
    hit_kind: HitKind
    rewards_granted: Optional[BossRewards] = None

    @property
    def defeated(self) -> bool:
        return self.rewards_granted is not None


def resolve_damage(
    boss: Boss,
    task: Task,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> BossHit:
    """Apply a completed quest's damage to the boss.

    Hitting an already defeated boss is a no-op.
    """
    if boss.current_hp <= 0:
        return BossHit(boss=boss, damage=0, hit_kind=HitKind.NO_EFFECT)

    resistance = boss.resistances.get(task.category, NEUTRAL_RESISTANCE)
    damage = math.floor(base_damage(task.difficulty, settings) / resistance)

    if resistance < NEUTRAL_RESISTANCE:
        hit_kind = HitKind.CRITICAL
    elif resistance > NEUTRAL_RESISTANCE:
        hit_kind = HitKind.RESISTED
    else:
        hit_kind = HitKind.NORMAL

    new_hp = max(0, boss.current_hp - damage)
    if new_hp == 0:
        week = week_number(now, settings.week_start, settings.timezone)
        defeated_boss = boss.model_copy(
            update={
                "current_hp": 0,
                "last_defeated_week": week,
            }
        )
        return BossHit(
            boss=defeated_boss,
            damage=damage,
            hit_kind=hit_kind,
            rewards_granted=boss.rewards,
        )

    return BossHit(
        boss=boss.model_copy(update={"current_hp": new_hp}),
        damage=damage,
        hit_kind=hit_kind,
    )


def is_active_this_week(
    boss: Boss, now: datetime, settings: ProgressionSettings = DEFAULT_SETTINGS
) -> bool:
    """A boss stays in play until it is defeated in the current week."""
    current_week = week_number(now, settings.week_start, settings.timezone)
    return boss.last_defeated_week != current_week
