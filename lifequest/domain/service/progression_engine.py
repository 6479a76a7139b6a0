"""Progression engine: the single entry point for user-state mutations."""

import dataclasses
from datetime import datetime
from typing import Optional
from uuid import uuid4
from zoneinfo import ZoneInfo

import logfire

from lifequest.config import ProgressionSettings
from lifequest.domain.error import BusinessRuleViolationError, NotFoundError
from lifequest.domain.model import UserState
from lifequest.domain.repository import TaskRepository, UserStateRepository
from lifequest.domain.rules import (
    LedgerResult,
    LevelChange,
    RolloverResult,
    SkillUpgrade,
    apply_coin_delta,
    apply_gem_delta,
    apply_xp_delta,
    level_up_skill,
    rollover,
)
from lifequest.domain.rules.defaults import create_default_user
from lifequest.domain.rules.notifications import (
    mark_read,
    push_notification,
    remove_notification,
)
from lifequest.domain.value import NotificationId, NotificationType, UserId

from .base import Service
from .sync_service import TASKS, USERS, SyncService


class ProgressionEngine(Service):
    """Loads, mutates and stores the user state.

    Every mutation runs the pure rule, records user-visible notifications,
    persists the new snapshot and appends it to the sync log. Rejected
    mutations never change balances or progress.
    """

    def __init__(
        self,
        user_state_repository: UserStateRepository,
        task_repository: TaskRepository,
        sync_service: SyncService,
        settings: ProgressionSettings,
    ) -> None:
        """Initialize progression engine.

        Args:
            user_state_repository: User state repository
            task_repository: Task repository (read by the daily rollover)
            sync_service: Pending-operation log
            settings: Game balance settings
        """
        self.user_state_repository = user_state_repository
        self.task_repository = task_repository
        self.sync_service = sync_service
        self.settings = settings

    def now(self) -> datetime:
        """Current time in the configured user timezone."""
        return datetime.now(ZoneInfo(self.settings.timezone))

    def notify(
        self,
        state: UserState,
        title: str,
        message: str,
        now: datetime,
        type: NotificationType = NotificationType.GENERIC,
    ) -> UserState:
        """Prepend a notification to the state (not persisted)."""
        return push_notification(
            state, title, message, now, self.settings.notification_limit, type
        )

    def announce_levels(
        self, state: UserState, change: LevelChange, now: datetime
    ) -> UserState:
        """Add level up and level down notifications for a level change."""
        for level in change.levels_gained:
            state = self.notify(
                state,
                "Level Up!",
                f"Congratulations! You've reached level {level} and earned "
                f"{self.settings.skill_points_per_level} stat points!",
                now,
                NotificationType.ACHIEVEMENT,
            )
        for level in change.levels_lost:
            state = self.notify(
                state, "Level Down", f"You dropped to level {level}.", now
            )
        return state

    async def create_user(
        self,
        name: Optional[str] = None,
        user_id: Optional[UserId] = None,
        now: Optional[datetime] = None,
    ) -> UserState:
        """Create a new account with the default starting state.

        Args:
            name: Display name
            user_id: Requested ID (generated when omitted)
            now: Creation time

        Returns:
            The new user state

        Raises:
            BusinessRuleViolationError: If the ID is already taken
        """
        user_id = user_id or UserId(uuid4())
        now = now or self.now()
        with logfire.span("progression_engine.create_user", user_id=str(user_id)):
            if await self.user_state_repository.find_by_id(user_id):
                logfire.warn("User already exists", user_id=str(user_id))
                raise BusinessRuleViolationError(f"User {user_id} already exists")

            state = create_default_user(user_id, now, name, self.settings)
            saved = await self.save_state(state, now)
            logfire.info("User created", user_id=str(user_id), name=saved.name)
            return saved

    async def get_user(self, user_id: UserId) -> UserState:
        """Load a user's state.

        Raises:
            NotFoundError: If no state is stored for the user
        """
        state = await self.user_state_repository.find_by_id(user_id)
        if state is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return state

    async def save_state(self, state: UserState, now: datetime) -> UserState:
        """Persist a snapshot and append it to the sync log."""
        saved = await self.user_state_repository.save(state)
        await self.sync_service.record_put(saved.id, USERS, str(saved.id), saved, now)
        return saved

    async def start_session(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> RolloverResult:
        """Run the daily rollover before any other same-day change.

        Calling this more than once a day is a no-op after the first call.

        Args:
            user_id: The user starting a session
            now: Session start time

        Returns:
            Rollover result carrying the stored state and tasks
        """
        now = now or self.now()
        with logfire.span("progression_engine.start_session", user_id=str(user_id)):
            state = await self.get_user(user_id)
            tasks = await self.task_repository.find_by_user(user_id)
            result = rollover(state, tasks, now, self.settings)
            if not result.applied:
                logfire.info("Rollover not due", user_id=str(user_id))
                return result

            changed = [
                new for old, new in zip(tasks, result.tasks) if new != old
            ]
            if changed:
                await self.task_repository.save_all(changed)
                for task in changed:
                    await self.sync_service.record_put(
                        user_id, TASKS, str(task.id), task, now
                    )

            new_state = result.state
            if result.exhausted:
                new_state = self.notify(
                    new_state,
                    "Exhausted!",
                    f"You entered the Penalty Zone! You lost "
                    f"{self.settings.exhaustion_xp_penalty} XP and "
                    f"{self.settings.exhaustion_coin_penalty} Coins, "
                    "but are now fully rested.",
                    now,
                    NotificationType.HEALTH_WARNING,
                )
            if result.health_penalty > 0:
                new_state = self.notify(
                    new_state,
                    "Daily Reset",
                    f"You took {result.health_penalty} damage from missed "
                    "quests and debuffs.",
                    now,
                    NotificationType.HEALTH_WARNING,
                )

            saved = await self.save_state(new_state, now)
            logfire.info(
                "Rollover applied",
                user_id=str(user_id),
                health_penalty=result.health_penalty,
                missed_dailies=len(result.missed_dailies),
                streak=saved.streak,
                exhausted=result.exhausted,
            )
            return dataclasses.replace(result, state=saved)

    async def gain_xp(
        self, user_id: UserId, amount: int, now: Optional[datetime] = None
    ) -> LevelChange:
        """Add (or with a negative amount, remove) XP and store the result."""
        now = now or self.now()
        with logfire.span(
            "progression_engine.gain_xp", user_id=str(user_id), amount=amount
        ):
            state = await self.get_user(user_id)
            change = apply_xp_delta(state, amount, self.settings)
            saved = await self.save_state(
                self.announce_levels(change.state, change, now), now
            )
            logfire.info(
                "XP applied",
                user_id=str(user_id),
                level=saved.level,
                xp=saved.xp,
                levels_gained=change.levels_gained,
                levels_lost=change.levels_lost,
            )
            return dataclasses.replace(change, state=saved)

    async def adjust_coins(
        self, user_id: UserId, amount: int, now: Optional[datetime] = None
    ) -> LedgerResult:
        """Apply a coin delta. Overdrawing deltas are rejected and not stored."""
        return await self._adjust_currency(user_id, amount, "coins", now)

    async def adjust_gems(
        self, user_id: UserId, amount: int, now: Optional[datetime] = None
    ) -> LedgerResult:
        """Apply a gem delta. Overdrawing deltas are rejected and not stored."""
        return await self._adjust_currency(user_id, amount, "gems", now)

    async def _adjust_currency(
        self,
        user_id: UserId,
        amount: int,
        currency: str,
        now: Optional[datetime],
    ) -> LedgerResult:
        now = now or self.now()
        with logfire.span(
            f"progression_engine.adjust_{currency}",
            user_id=str(user_id),
            amount=amount,
        ):
            state = await self.get_user(user_id)
            apply = apply_coin_delta if currency == "coins" else apply_gem_delta
            result = apply(state, amount)
            if not result.success:
                logfire.warn(
                    f"Not enough {currency}",
                    user_id=str(user_id),
                    amount=amount,
                    balance=getattr(state, currency),
                )
                return result

            saved = await self.save_state(result.state, now)
            return LedgerResult(state=saved, success=True)

    async def upgrade_skill(
        self,
        user_id: UserId,
        tree_name: str,
        skill_name: str,
        now: Optional[datetime] = None,
    ) -> SkillUpgrade:
        """Spend skill points on a skill."""
        now = now or self.now()
        with logfire.span(
            "progression_engine.upgrade_skill",
            user_id=str(user_id),
            tree=tree_name,
            skill=skill_name,
        ):
            state = await self.get_user(user_id)
            upgrade = level_up_skill(state, tree_name, skill_name)
            if not upgrade.success:
                logfire.warn(
                    "Cannot upgrade stat",
                    user_id=str(user_id),
                    outcome=upgrade.outcome.value,
                )
                return upgrade

            new_state = self.notify(
                upgrade.state,
                "Stat Upgraded!",
                f"{skill_name} ({tree_name}) upgraded.",
                now,
                NotificationType.ACHIEVEMENT,
            )
            saved = await self.save_state(new_state, now)
            return SkillUpgrade(state=saved, outcome=upgrade.outcome)

    async def mark_notifications_read(
        self,
        user_id: UserId,
        notification_id: Optional[NotificationId] = None,
        now: Optional[datetime] = None,
    ) -> UserState:
        """Mark one notification read, or all when no ID is given."""
        now = now or self.now()
        state = await self.get_user(user_id)
        return await self.save_state(mark_read(state, notification_id), now)

    async def delete_notification(
        self,
        user_id: UserId,
        notification_id: NotificationId,
        now: Optional[datetime] = None,
    ) -> UserState:
        """Remove a notification.

        Raises:
            NotFoundError: If the user has no such notification
        """
        now = now or self.now()
        state = await self.get_user(user_id)
        if not any(n.id == notification_id for n in state.notifications):
            raise NotFoundError("Notification", str(notification_id))
        return await self.save_state(remove_notification(state, notification_id), now)
