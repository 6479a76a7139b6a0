"""Unit tests for RewardService."""

import pytest

from lifequest.domain.error import NotFoundError
from lifequest.domain.rules import RedemptionOutcome
from lifequest.domain.rules.defaults import default_rewards
from lifequest.domain.service import ProgressionEngine, RewardService
from lifequest.domain.value import RedeemPeriod, RewardId
from tests.conftest import NOW
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRedeemReward:
    """Tests for redeeming rewards."""

    @pytest.mark.asyncio
    async def test_redeem_spends_coins(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)

        result = await reward_service.redeem_reward(
            state.id, RewardId("reward-6"), NOW
        )

        assert result.success
        stored = await engine.get_user(state.id)
        assert stored.coins == 0
        assert stored.notifications[0].title == "Reward Redeemed!"

    @pytest.mark.asyncio
    async def test_rejection_is_notified_without_charge(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)

        result = await reward_service.redeem_reward(
            state.id, RewardId("reward-2"), NOW
        )

        assert result.outcome is RedemptionOutcome.INSUFFICIENT_FUNDS
        stored = await engine.get_user(state.id)
        assert stored.coins == 50
        assert stored.redeemed_rewards == []
        assert stored.notifications[0].title == "Not enough coins!"

    @pytest.mark.asyncio
    async def test_daily_limit(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)
        await engine.adjust_coins(state.id, 950, NOW)

        outcomes = [
            (await reward_service.redeem_reward(state.id, RewardId("reward-2"), NOW)).outcome
            for _ in range(3)
        ]

        assert outcomes == [
            RedemptionOutcome.REDEEMED,
            RedemptionOutcome.REDEEMED,
            RedemptionOutcome.LIMIT_REACHED,
        ]
        stored = await engine.get_user(state.id)
        assert stored.coins == 700
        assert stored.notifications[0].title == "Redemption Limit Reached"

    @pytest.mark.asyncio
    async def test_unknown_reward_raises_not_found(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)

        with pytest.raises(NotFoundError):
            await reward_service.redeem_reward(state.id, RewardId("reward-99"), NOW)


class TestCustomRewards:
    @pytest.mark.asyncio
    async def test_custom_reward_joins_catalogue(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)

        reward = await reward_service.add_custom_reward(
            state.id,
            "Bubble bath",
            coin_cost=20,
            redeem_limit=1,
            redeem_period=RedeemPeriod.WEEKLY,
            now=NOW,
        )

        rewards = await reward_service.list_rewards(state.id)
        assert len(rewards) == len(default_rewards()) + 1
        assert rewards[-1] == reward
        assert reward.id.startswith("custom-")

    @pytest.mark.asyncio
    async def test_custom_reward_can_be_redeemed_and_deleted(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)
        reward = await reward_service.add_custom_reward(
            state.id, "Nap", gem_cost=2, now=NOW
        )

        result = await reward_service.redeem_reward(state.id, reward.id, NOW)
        await reward_service.delete_custom_reward(state.id, reward.id, NOW)

        assert result.success
        stored = await engine.get_user(state.id)
        assert stored.gems == 3
        assert stored.custom_rewards == []

    @pytest.mark.asyncio
    async def test_built_in_reward_cannot_be_deleted(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        reward_service = await unit_env.get(RewardService)
        state = await engine.create_user(now=NOW)

        with pytest.raises(NotFoundError):
            await reward_service.delete_custom_reward(
                state.id, RewardId("reward-1"), NOW
            )
