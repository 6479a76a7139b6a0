"""Quest (task) domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from lifequest.domain.error import NotFoundError, NotOwnerError
from lifequest.domain.model import Task, UserState
from lifequest.domain.repository import TaskRepository
from lifequest.domain.rules import (
    BossHit,
    LevelChange,
    complete_task,
    uncomplete_task,
)
from lifequest.domain.value import (
    Difficulty,
    NotificationType,
    TaskCategory,
    TaskId,
    TaskType,
    UserId,
)

from .base import Service
from .boss_service import BossService
from .progression_engine import ProgressionEngine
from .sync_service import TASKS


@dataclass(frozen=True)
class QuestOutcome:
    """Result of toggling a quest's completion."""

    state: UserState
    task: Task
    changed: bool
    boss_hit: Optional[BossHit] = None
    coins_applied: bool = True
    levels_gained: list[int] = field(default_factory=list)
    levels_lost: list[int] = field(default_factory=list)


class QuestService(Service):
    """Domain service for quests and their completion rewards."""

    def __init__(
        self,
        task_repository: TaskRepository,
        engine: ProgressionEngine,
        boss_service: BossService,
    ) -> None:
        """Initialize quest service.

        Args:
            task_repository: Task repository
            engine: Progression engine
            boss_service: Boss service, hit on every newly completed quest
        """
        self.task_repository = task_repository
        self.engine = engine
        self.boss_service = boss_service

    async def _save(self, task: Task, now: datetime) -> Task:
        saved = await self.task_repository.save(task)
        await self.engine.sync_service.record_put(
            saved.user_id, TASKS, str(saved.id), saved, now
        )
        return saved

    async def create_task(
        self,
        user_id: UserId,
        title: str,
        category: TaskCategory,
        difficulty: Difficulty = Difficulty.NOT_APPLICABLE,
        type: TaskType = TaskType.ONE_TIME,
        xp: int = 0,
        coins: int = 0,
        description: Optional[str] = None,
        intention: Optional[str] = None,
        due_date: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Task:
        """Add a quest to the user's log.

        Raises:
            NotFoundError: If the user does not exist
        """
        now = now or self.engine.now()
        with logfire.span("quest_service.create_task", user_id=str(user_id), title=title):
            await self.engine.get_user(user_id)
            task = Task(
                id=TaskId(uuid4()),
                user_id=user_id,
                title=title,
                description=description,
                intention=intention,
                category=category,
                difficulty=difficulty,
                type=type,
                xp=xp,
                coins=coins,
                due_date=due_date,
                created_at=now,
            )
            saved = await self._save(task, now)
            logfire.info("Quest added", user_id=str(user_id), task_id=str(saved.id))
            return saved

    async def get_task(self, user_id: UserId, task_id: TaskId) -> Task:
        """Get one of the user's quests.

        Raises:
            NotFoundError: If the quest does not exist
            NotOwnerError: If the quest belongs to another user
        """
        task = await self.task_repository.find_by_id(task_id)
        if task is None:
            logfire.warn("Task not found", task_id=str(task_id))
            raise NotFoundError("Task", str(task_id))
        if task.user_id != user_id:
            raise NotOwnerError("task", str(task_id), str(user_id))
        return task

    async def list_tasks(self, user_id: UserId) -> list[Task]:
        """List the user's quests, newest first."""
        return await self.task_repository.find_by_user(user_id)

    async def set_completion(
        self,
        user_id: UserId,
        task_id: TaskId,
        completed: bool,
        now: Optional[datetime] = None,
    ) -> QuestOutcome:
        """Check or uncheck a quest.

        The daily rollover runs first if it is due. Only the transition to
        completed damages the boss; unchecking never heals it.

        Args:
            user_id: Owner of the quest
            task_id: The quest
            completed: Requested completion state
            now: Time of the change

        Returns:
            Quest outcome with the stored state and task
        """
        now = now or self.engine.now()
        with logfire.span(
            "quest_service.set_completion",
            user_id=str(user_id),
            task_id=str(task_id),
            completed=completed,
        ):
            await self.engine.start_session(user_id, now)
            state = await self.engine.get_user(user_id)
            task = await self.get_task(user_id, task_id)

            toggle = (
                complete_task(state, task, now, self.engine.settings)
                if completed
                else uncomplete_task(state, task, now, self.engine.settings)
            )
            if not toggle.changed:
                logfire.info("Quest already in requested state", task_id=str(task_id))
                return QuestOutcome(state=state, task=task, changed=False)

            new_state = toggle.state
            boss_hit = None
            if toggle.newly_completed:
                new_state = self.engine.notify(
                    new_state,
                    "Quest Complete!",
                    f'"{task.title}" done. You earned {task.xp} XP and '
                    f"{task.coins} Coins.",
                    now,
                )
                new_state, boss_hit = await self.boss_service.strike(
                    new_state, toggle.task, now
                )
            else:
                new_state = self.engine.notify(
                    new_state,
                    "Quest Undone",
                    f'"{task.title}" unchecked. {task.xp} XP and '
                    f"{task.coins} Coins were taken back.",
                    now,
                )
                if not toggle.coins_applied:
                    new_state = self.engine.notify(
                        new_state,
                        "Not enough coins!",
                        "Your balance could not cover the quest's coins.",
                        now,
                        NotificationType.HEALTH_WARNING,
                    )

            # Level notifications from the quest itself, boss loot adds its own
            change_state = self.engine.announce_levels(
                new_state,
                LevelChange(
                    state=new_state,
                    levels_gained=toggle.levels_gained,
                    levels_lost=toggle.levels_lost,
                ),
                now,
            )
            saved_task = await self._save(toggle.task, now)
            saved_state = await self.engine.save_state(change_state, now)
            logfire.info(
                "Quest toggled",
                user_id=str(user_id),
                task_id=str(task_id),
                completed=saved_task.completed,
                streak=saved_task.streak,
                level=saved_state.level,
            )
            return QuestOutcome(
                state=saved_state,
                task=saved_task,
                changed=True,
                boss_hit=boss_hit,
                coins_applied=toggle.coins_applied,
                levels_gained=toggle.levels_gained,
                levels_lost=toggle.levels_lost,
            )

    async def delete_task(
        self, user_id: UserId, task_id: TaskId, now: Optional[datetime] = None
    ) -> None:
        """Delete a quest. Rewards already granted are kept."""
        now = now or self.engine.now()
        with logfire.span(
            "quest_service.delete_task", user_id=str(user_id), task_id=str(task_id)
        ):
            await self.get_task(user_id, task_id)
            await self.task_repository.delete(task_id)
            await self.engine.sync_service.record_delete(
                user_id, TASKS, str(task_id), now
            )
            logfire.info("Quest deleted", user_id=str(user_id), task_id=str(task_id))
