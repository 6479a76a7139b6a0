"""Unit tests for reward use cases."""

import pytest
from pydantic import ValidationError

from lifequest.application.usecase.reward import (
    AddCustomRewardRequest,
    AddCustomRewardUseCase,
    ListRewardsRequest,
    ListRewardsUseCase,
    RedeemRewardRequest,
    RedeemRewardUseCase,
)
from lifequest.domain.rules import RedemptionOutcome
from lifequest.domain.service import ProgressionEngine
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListRewardsUseCase:
    @pytest.mark.asyncio
    async def test_views_report_redeemability(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        use_case = await unit_env.get(ListRewardsUseCase)
        user = await engine.create_user()

        response = await use_case.execute(ListRewardsRequest(user_id=user.id))

        views = {view.reward.id: view for view in response.rewards}
        assert views["reward-6"].can_redeem
        assert not views["reward-1"].can_redeem  # level 5 required
        assert not views["reward-2"].can_redeem  # 150 coins, user has 50
        assert all(view.redeemed_in_period == 0 for view in response.rewards)

    @pytest.mark.asyncio
    async def test_redeemed_count_follows_redemptions(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        redeem = await unit_env.get(RedeemRewardUseCase)
        use_case = await unit_env.get(ListRewardsUseCase)
        user = await engine.create_user()
        await engine.adjust_coins(user.id, 450)

        redeemed = await redeem.execute(
            RedeemRewardRequest(user_id=user.id, reward_id="reward-2")
        )
        response = await use_case.execute(ListRewardsRequest(user_id=user.id))

        assert redeemed.success
        assert redeemed.outcome is RedemptionOutcome.REDEEMED
        assert redeemed.user.coins == 350
        gaming = next(v for v in response.rewards if v.reward.id == "reward-2")
        assert gaming.redeemed_in_period == 1
        assert gaming.can_redeem


class TestAddCustomRewardUseCase:
    @pytest.mark.asyncio
    async def test_custom_reward_is_listed(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        add_reward = await unit_env.get(AddCustomRewardUseCase)
        use_case = await unit_env.get(ListRewardsUseCase)
        user = await engine.create_user()

        added = await add_reward.execute(
            AddCustomRewardRequest(user_id=user.id, title="Board game night", coin_cost=40)
        )
        response = await use_case.execute(ListRewardsRequest(user_id=user.id))

        assert response.rewards[-1].reward == added.reward
        assert response.rewards[-1].can_redeem

    def test_custom_reward_needs_a_price(self):
        with pytest.raises(ValidationError):
            AddCustomRewardRequest(user_id="00000000-0000-0000-0000-000000000001", title="Free")
