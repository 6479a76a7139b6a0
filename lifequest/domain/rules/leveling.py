"""Level ladder: XP, level and skill point computation."""

import math
from dataclasses import dataclass, field

from lifequest.config import ProgressionSettings
from lifequest.domain.model import UserState

DEFAULT_SETTINGS = ProgressionSettings()


def xp_for_level(level: int, settings: ProgressionSettings = DEFAULT_SETTINGS) -> int:
    """XP required to advance into ``level`` from the level below it."""
    return math.floor(settings.xp_base * max(level, 1) ** settings.xp_exponent)


@dataclass(frozen=True)
class LevelChange:
    """Outcome of an XP change.

    ``levels_gained`` lists every level reached, in order, so callers can
    announce each one. ``levels_lost`` lists the levels dropped to.
    """

    state: UserState
    levels_gained: list[int] = field(default_factory=list)
    levels_lost: list[int] = field(default_factory=list)

    @property
    def leveled_up(self) -> bool:
        return bool(self.levels_gained)


def apply_xp_delta(
    state: UserState,
    amount: int,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> LevelChange:
    """Add (or remove) XP, carrying over into level ups and level downs.

    Gaining XP at the level cap leaves XP at 0. Losing XP borrows the
    previous level's requirement until XP is non-negative; level and XP
    never drop below 0.
    """
    xp = state.xp + amount
    level = state.level
    xp_to_next = state.xp_to_next_level
    skill_points = state.skill_points
    gained: list[int] = []
    lost: list[int] = []

    if amount > 0:
        while level < settings.max_level and xp >= xp_to_next:
            xp -= xp_to_next
            level += 1
            skill_points += settings.skill_points_per_level
            xp_to_next = xp_for_level(level + 1, settings)
            gained.append(level)
        if level >= settings.max_level:
            xp = 0
    else:
        while xp < 0 and level > 0:
            previous_requirement = xp_for_level(level, settings)
            xp += previous_requirement
            level -= 1
            skill_points = max(0, skill_points - settings.skill_points_per_level)
            xp_to_next = previous_requirement
            lost.append(level)

    new_state = state.model_copy(
        update={
            "xp": max(0, xp),
            "level": level,
            "xp_to_next_level": xp_to_next,
            "skill_points": skill_points,
        }
    )
    return LevelChange(state=new_state, levels_gained=gained, levels_lost=lost)
