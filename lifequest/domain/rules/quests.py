"""Quest completion: rewards and recurring-quest streaks."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from lifequest.config import ProgressionSettings
from lifequest.domain.model import Task, UserState
from lifequest.domain.rules.calendar import is_same_day
from lifequest.domain.rules.currency import apply_coin_delta
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS, apply_xp_delta


@dataclass(frozen=True)
class TaskToggle:
    """Outcome of checking or unchecking a quest.

    ``changed`` is False when the quest was already in the requested state.
    ``coins_applied`` is False when reversing coins would have overdrawn.
    """

    state: UserState
    task: Task
    changed: bool
    levels_gained: list[int] = field(default_factory=list)
    levels_lost: list[int] = field(default_factory=list)
    coins_applied: bool = True

    @property
    def newly_completed(self) -> bool:
        return self.changed and self.task.completed


def _completion_streak(task: Task, now: datetime, tz: str) -> int:
    if not task.type.is_recurring:
        return task.streak
    last = task.last_completed
    if last is not None and is_same_day(last, now, tz):
        return task.streak
    if last is None or is_same_day(last, now - timedelta(days=1), tz):
        return task.streak + 1
    # Gap since the last completion
    return 1


def complete_task(
    state: UserState,
    task: Task,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> TaskToggle:
    """Mark a quest done and grant its XP and coins."""
    if task.completed:
        return TaskToggle(state=state, task=task, changed=False)

    level_change = apply_xp_delta(state, task.xp, settings)
    ledger = apply_coin_delta(level_change.state, task.coins)
    new_state = ledger.state.model_copy(
        update={"tasks_completed": ledger.state.tasks_completed + 1}
    )
    new_task = task.model_copy(
        update={
            "completed": True,
            "streak": _completion_streak(task, now, settings.timezone),
            "last_completed": now,
        }
    )
    return TaskToggle(
        state=new_state,
        task=new_task,
        changed=True,
        levels_gained=level_change.levels_gained,
        coins_applied=ledger.success,
    )


def uncomplete_task(
    state: UserState,
    task: Task,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> TaskToggle:
    """Undo a quest completion, taking back its XP and coins."""
    if not task.completed:
        return TaskToggle(state=state, task=task, changed=False)

    level_change = apply_xp_delta(state, -task.xp, settings)
    ledger = apply_coin_delta(level_change.state, -task.coins)

    streak = task.streak
    if (
        task.type.is_recurring
        and task.last_completed is not None
        and is_same_day(task.last_completed, now, settings.timezone)
    ):
        streak = max(0, streak - 1)

    return TaskToggle(
        state=ledger.state,
        task=task.model_copy(update={"completed": False, "streak": streak}),
        changed=True,
        levels_lost=level_change.levels_lost,
        coins_applied=ledger.success,
    )
