"""Reward shop domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from lifequest.domain.error import NotFoundError
from lifequest.domain.model import RewardItem, UserState
from lifequest.domain.rules import RedemptionOutcome, RedemptionResult, redeem
from lifequest.domain.rules.defaults import default_rewards
from lifequest.domain.value import (
    NotificationType,
    RedeemPeriod,
    RewardCategory,
    RewardId,
    UserId,
)

from .base import Service
from .progression_engine import ProgressionEngine


class RewardService(Service):
    """Domain service for the built-in and custom reward catalogue."""

    def __init__(self, engine: ProgressionEngine) -> None:
        """Initialize reward service.

        Args:
            engine: Progression engine
        """
        self.engine = engine

    @staticmethod
    def catalogue(state: UserState) -> list[RewardItem]:
        """Built-in rewards followed by the user's own."""
        return [*default_rewards(), *state.custom_rewards]

    async def list_rewards(self, user_id: UserId) -> list[RewardItem]:
        """List every reward the user can shop for."""
        return self.catalogue(await self.engine.get_user(user_id))

    async def redeem_reward(
        self, user_id: UserId, reward_id: RewardId, now: Optional[datetime] = None
    ) -> RedemptionResult:
        """Buy a reward.

        Rejections (limit, funds, level) are reported in the result outcome
        and recorded as a notification; the purchase is not stored.

        Raises:
            NotFoundError: If the reward is not in the user's catalogue
        """
        now = now or self.engine.now()
        with logfire.span(
            "reward_service.redeem_reward",
            user_id=str(user_id),
            reward_id=str(reward_id),
        ):
            state = await self.engine.get_user(user_id)
            reward = next(
                (r for r in self.catalogue(state) if r.id == reward_id), None
            )
            if reward is None:
                raise NotFoundError("Reward", str(reward_id))

            result = redeem(state, reward, now, self.engine.settings)
            if not result.success:
                logfire.warn(
                    "Reward not redeemed",
                    user_id=str(user_id),
                    reward_id=str(reward_id),
                    outcome=result.outcome.value,
                )
                # Rejections are still surfaced to the user
                rejected = self.engine.notify(
                    state,
                    *self._rejection_message(reward, result.outcome),
                    now,
                    NotificationType.REMINDER,
                )
                saved = await self.engine.save_state(rejected, now)
                return RedemptionResult(state=saved, outcome=result.outcome)

            if reward.item is not None:
                title = "Item Purchased!"
                message = f"{reward.title} has been added to your inventory."
            else:
                title, message = "Reward Redeemed!", f"Enjoy: {reward.title}."
            new_state = self.engine.notify(
                result.state, title, message, now, NotificationType.ACHIEVEMENT
            )
            saved = await self.engine.save_state(new_state, now)
            logfire.info(
                "Reward redeemed",
                user_id=str(user_id),
                reward_id=str(reward_id),
                coins=saved.coins,
                gems=saved.gems,
            )
            return RedemptionResult(state=saved, outcome=result.outcome)

    @staticmethod
    def _rejection_message(
        reward: RewardItem, outcome: RedemptionOutcome
    ) -> tuple[str, str]:
        if outcome is RedemptionOutcome.LIMIT_REACHED:
            return "Redemption Limit Reached", f"{reward.title} is used up for now."
        if outcome is RedemptionOutcome.LEVEL_TOO_LOW:
            return (
                "Level Too Low",
                f"{reward.title} unlocks at level {reward.level_requirement}.",
            )
        currency = "gems" if reward.gem_cost else "coins"
        return f"Not enough {currency}!", f"You cannot afford {reward.title}."

    async def add_custom_reward(
        self,
        user_id: UserId,
        title: str,
        description: str = "",
        coin_cost: Optional[int] = None,
        gem_cost: Optional[int] = None,
        redeem_limit: Optional[int] = None,
        redeem_period: Optional[RedeemPeriod] = None,
        now: Optional[datetime] = None,
    ) -> RewardItem:
        """Add a user-defined reward (no level requirement)."""
        now = now or self.engine.now()
        with logfire.span(
            "reward_service.add_custom_reward", user_id=str(user_id), title=title
        ):
            state = await self.engine.get_user(user_id)
            reward = RewardItem(
                id=RewardId(f"custom-{uuid4().hex}"),
                title=title,
                description=description,
                coin_cost=coin_cost,
                gem_cost=gem_cost,
                category=RewardCategory.CUSTOM,
                level_requirement=0,
                redeem_limit=redeem_limit,
                redeem_period=redeem_period,
            )
            await self.engine.save_state(
                state.model_copy(
                    update={"custom_rewards": [*state.custom_rewards, reward]}
                ),
                now,
            )
            logfire.info(
                "Custom reward added", user_id=str(user_id), reward_id=str(reward.id)
            )
            return reward

    async def delete_custom_reward(
        self, user_id: UserId, reward_id: RewardId, now: Optional[datetime] = None
    ) -> UserState:
        """Remove a user-defined reward.

        Raises:
            NotFoundError: If the user has no custom reward with that ID
        """
        now = now or self.engine.now()
        state = await self.engine.get_user(user_id)
        remaining = [r for r in state.custom_rewards if r.id != reward_id]
        if len(remaining) == len(state.custom_rewards):
            raise NotFoundError("Reward", str(reward_id))
        logfire.info(
            "Custom reward deleted", user_id=str(user_id), reward_id=str(reward_id)
        )
        return await self.engine.save_state(
            state.model_copy(update={"custom_rewards": remaining}), now
        )
