"""Weekly boss domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from lifequest.config import ProgressionSettings
from lifequest.domain.error import NotFoundError
from lifequest.domain.model import Boss, Task, UserState
from lifequest.domain.repository import BossRepository
from lifequest.domain.rules import (
    BossHit,
    apply_coin_delta,
    apply_gem_delta,
    apply_xp_delta,
    resolve_damage,
)
from lifequest.domain.rules.calendar import week_number
from lifequest.domain.value import (
    BossId,
    BossRewards,
    HitKind,
    NotificationType,
    TaskCategory,
    UserId,
)

from .base import Service
from .progression_engine import ProgressionEngine
from .sync_service import BOSSES


class BossService(Service):
    """Domain service for the user's weekly boss."""

    def __init__(
        self, boss_repository: BossRepository, engine: ProgressionEngine
    ) -> None:
        """Initialize boss service.

        Args:
            boss_repository: Boss repository
            engine: Progression engine (clock, notifications, sync log)
        """
        self.boss_repository = boss_repository
        self.engine = engine

    @property
    def settings(self) -> ProgressionSettings:
        return self.engine.settings

    async def _save(self, boss: Boss, now: datetime) -> Boss:
        saved = await self.boss_repository.save(boss)
        await self.engine.sync_service.record_put(
            saved.user_id, BOSSES, str(saved.user_id), saved, now
        )
        return saved

    async def get_boss(self, user_id: UserId) -> Boss:
        """Get the boss assigned to a user.

        Raises:
            NotFoundError: If no boss is assigned
        """
        boss = await self.boss_repository.find_by_user(user_id)
        if boss is None:
            logfire.warn("Boss not found", user_id=str(user_id))
            raise NotFoundError("Boss", str(user_id))
        return boss

    async def current_boss(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> Optional[Boss]:
        """Get the boss in play this week.

        A boss defeated in an earlier week respawns at full HP.

        Args:
            user_id: The user's ID
            now: Current time

        Returns:
            The boss, or None if none is assigned
        """
        now = now or self.engine.now()
        boss = await self.boss_repository.find_by_user(user_id)
        if boss is None:
            return None
        current_week = week_number(
            now, self.settings.week_start, self.settings.timezone
        )
        if boss.is_defeated and boss.last_defeated_week != current_week:
            logfire.info(
                "Boss respawned",
                user_id=str(user_id),
                boss=boss.name,
                week=current_week,
            )
            return await self._save(self._reset(boss), now)
        return boss

    @staticmethod
    def _reset(boss: Boss) -> Boss:
        return boss.model_copy(
            update={"current_hp": boss.max_hp, "last_defeated_week": None}
        )

    async def assign_boss(
        self,
        user_id: UserId,
        name: str,
        max_hp: int,
        title: str = "",
        resistances: Optional[dict[TaskCategory, float]] = None,
        rewards: Optional[BossRewards] = None,
        now: Optional[datetime] = None,
    ) -> Boss:
        """Assign a fresh boss to a user, replacing the previous one.

        Args:
            user_id: The user's ID
            name: Boss name
            max_hp: Starting and maximum HP
            title: Boss title
            resistances: Category damage divisors (1.0 is neutral)
            rewards: Loot granted on defeat
            now: Current time

        Returns:
            The new boss at full HP
        """
        now = now or self.engine.now()
        with logfire.span(
            "boss_service.assign_boss", user_id=str(user_id), name=name
        ):
            await self.engine.get_user(user_id)
            boss = Boss(
                id=BossId(uuid4()),
                user_id=user_id,
                name=name,
                title=title,
                max_hp=max_hp,
                current_hp=max_hp,
                resistances=resistances or {},
                rewards=rewards or BossRewards(),
            )
            saved = await self._save(boss, now)
            logfire.info("Boss assigned", user_id=str(user_id), boss_id=str(saved.id))
            return saved

    async def reset_boss(
        self, user_id: UserId, now: Optional[datetime] = None
    ) -> Boss:
        """Restore the current boss to full HP and clear its defeat week."""
        now = now or self.engine.now()
        with logfire.span("boss_service.reset_boss", user_id=str(user_id)):
            boss = await self.get_boss(user_id)
            return await self._save(self._reset(boss), now)

    async def strike(
        self, state: UserState, task: Task, now: datetime
    ) -> tuple[UserState, Optional[BossHit]]:
        """Hit the user's boss with a newly completed quest.

        The boss is saved here; the returned user state (with any defeat
        loot and notifications applied) is left for the caller to store.

        Args:
            state: Current user state
            task: The quest that was just completed
            now: Completion time

        Returns:
            Updated user state and the hit, or no hit if no boss is assigned
        """
        with logfire.span(
            "boss_service.strike", user_id=str(state.id), task_id=str(task.id)
        ):
            boss = await self.current_boss(state.id, now)
            if boss is None:
                return state, None

            hit = resolve_damage(boss, task, now, self.settings)
            if hit.hit_kind is HitKind.NO_EFFECT:
                logfire.info("Boss already defeated", user_id=str(state.id))
                return state, hit

            await self._save(hit.boss, now)
            state = self.engine.notify(
                state, *self._hit_message(hit), now, NotificationType.GENERIC
            )
            logfire.info(
                "Boss damaged",
                user_id=str(state.id),
                damage=hit.damage,
                hit_kind=hit.hit_kind.value,
                current_hp=hit.boss.current_hp,
            )

            if hit.rewards_granted is not None:
                state = self._grant_loot(state, hit.rewards_granted, now)
                logfire.info(
                    "Boss defeated",
                    user_id=str(state.id),
                    boss=hit.boss.name,
                    week=hit.boss.last_defeated_week,
                )
            return state, hit

    @staticmethod
    def _hit_message(hit: BossHit) -> tuple[str, str]:
        if hit.hit_kind is HitKind.CRITICAL:
            return "Critical Hit!", f"Dealt {hit.damage} bonus damage!"
        if hit.hit_kind is HitKind.RESISTED:
            return "Resisted!", f"Dealt only {hit.damage} damage."
        return "Boss Damaged!", f"Dealt {hit.damage} damage."

    def _grant_loot(
        self, state: UserState, rewards: BossRewards, now: datetime
    ) -> UserState:
        change = apply_xp_delta(state, rewards.xp, self.settings)
        state = apply_coin_delta(change.state, rewards.coins).state
        state = apply_gem_delta(state, rewards.gems).state
        state = self.engine.notify(
            state,
            "Boss Defeated!",
            f"You earned {rewards.xp} XP, {rewards.coins} Coins, "
            f"and {rewards.gems} Gems!",
            now,
            NotificationType.ACHIEVEMENT,
        )
        return self.engine.announce_levels(state, change, now)
