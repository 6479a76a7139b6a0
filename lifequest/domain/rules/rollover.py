"""Daily rollover: debuff decay, missed-daily penalties and streaks.

Rollover is a barrier run once at session start, before any same-day task
changes, and is computed from the previously stored login and task state.
"""

from dataclasses import dataclass, field
from datetime import datetime

from lifequest.config import ProgressionSettings
from lifequest.domain.model import Debuff, Task, UserState
from lifequest.domain.rules.calendar import is_later_day
from lifequest.domain.rules.effects import evaluate_health_loss
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS
from lifequest.domain.value import TaskType


@dataclass(frozen=True)
class RolloverResult:
    """Outcome of a rollover attempt.

    ``applied`` is False when ``now`` is not on a later calendar day than the
    stored login; state and tasks are then returned untouched.
    """

    state: UserState
    tasks: list[Task]
    applied: bool
    health_penalty: int = 0
    debuff_damage: int = 0
    missed_dailies: list[Task] = field(default_factory=list)
    expired_debuffs: list[Debuff] = field(default_factory=list)
    exhausted: bool = False


def rollover(
    state: UserState,
    tasks: list[Task],
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> RolloverResult:
    """Advance the user into a new calendar day.

    A single tick is applied no matter how many days were skipped.
    """
    if not is_later_day(state.last_login, now, settings.timezone):
        return RolloverResult(state=state, tasks=list(tasks), applied=False)

    # Debuffs tick: every active debuff drains before its duration drops
    debuff_damage = 0
    active_debuffs: list[Debuff] = []
    expired: list[Debuff] = []
    for debuff in state.debuffs:
        debuff_damage += evaluate_health_loss(debuff.effect, state)
        remaining = debuff.duration - 1
        if remaining > 0:
            active_debuffs.append(debuff.model_copy(update={"duration": remaining}))
        else:
            expired.append(debuff)

    health_penalty = debuff_damage
    missed: list[Task] = []
    updated_tasks: list[Task] = []
    for task in tasks:
        if task.type is TaskType.DAILY and not task.completed:
            health_penalty += settings.missed_daily_health_penalty
            missed.append(task)
            updated_tasks.append(task.model_copy(update={"streak": 0}))
        elif task.type is TaskType.DAILY:
            updated_tasks.append(task.model_copy(update={"completed": False}))
        else:
            updated_tasks.append(task)

    dailies = [t for t in tasks if t.type is TaskType.DAILY]
    all_dailies_completed = bool(dailies) and all(t.completed for t in dailies)
    new_streak = state.streak + 1 if all_dailies_completed else 0

    update = {
        "health": min(state.max_health, state.health - health_penalty),
        "debuffs": active_debuffs,
        "streak": new_streak,
        "longest_streak": max(state.longest_streak, new_streak),
        "last_login": now,
    }

    exhausted = update["health"] <= 0
    if exhausted:
        # Hard reset: the user is fully rested again, at a cost
        update["xp"] = max(0, state.xp - settings.exhaustion_xp_penalty)
        update["coins"] = max(0, state.coins - settings.exhaustion_coin_penalty)
        update["health"] = state.max_health
        update["debuffs"] = []

    return RolloverResult(
        state=state.model_copy(update=update),
        tasks=updated_tasks,
        applied=True,
        health_penalty=health_penalty,
        debuff_damage=debuff_damage,
        missed_dailies=missed,
        expired_debuffs=expired,
        exhausted=exhausted,
    )
