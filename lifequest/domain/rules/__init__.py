"""Pure progression rules.

Every function takes plain domain models and returns new ones; nothing here
touches persistence or logging.
"""

from lifequest.domain.rules.combat import BossHit, base_damage, resolve_damage
from lifequest.domain.rules.currency import (
    LedgerResult,
    apply_coin_delta,
    apply_gem_delta,
)
from lifequest.domain.rules.leveling import LevelChange, apply_xp_delta, xp_for_level
from lifequest.domain.rules.penalty import DeletionPenalty, compute_deletion_penalty
from lifequest.domain.rules.quests import TaskToggle, complete_task, uncomplete_task
from lifequest.domain.rules.redemption import (
    RedemptionOutcome,
    RedemptionResult,
    can_redeem,
    redeem,
    redeemed_count,
)
from lifequest.domain.rules.rollover import RolloverResult, rollover
from lifequest.domain.rules.skills import (
    SkillUpgrade,
    SkillUpgradeOutcome,
    level_up_skill,
)

__all__ = [
    "apply_xp_delta",
    "xp_for_level",
    "LevelChange",
    "apply_coin_delta",
    "apply_gem_delta",
    "LedgerResult",
    "rollover",
    "RolloverResult",
    "resolve_damage",
    "base_damage",
    "BossHit",
    "can_redeem",
    "redeem",
    "redeemed_count",
    "RedemptionOutcome",
    "RedemptionResult",
    "compute_deletion_penalty",
    "DeletionPenalty",
    "complete_task",
    "uncomplete_task",
    "TaskToggle",
    "level_up_skill",
    "SkillUpgrade",
    "SkillUpgradeOutcome",
]
