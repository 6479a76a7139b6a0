"""List rewards use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import RewardItem
from lifequest.domain.rules import can_redeem, redeemed_count
from lifequest.domain.service import RewardService
from lifequest.domain.value import UserId


class ListRewardsRequest(BaseModel):
    """List rewards request."""

    user_id: UUID


class RewardView(BaseModel):
    """A reward with the user's standing against its limit."""

    reward: RewardItem
    redeemed_in_period: int
    can_redeem: bool


class ListRewardsResponse(BaseModel):
    """List rewards response."""

    rewards: list[RewardView]


class ListRewardsUseCase:
    """Use case for the reward shop listing."""

    def __init__(self, reward_service: RewardService) -> None:
        self.reward_service = reward_service

    async def execute(self, request: ListRewardsRequest) -> ListRewardsResponse:
        engine = self.reward_service.engine
        state = await engine.get_user(UserId(request.user_id))
        now = engine.now()
        return ListRewardsResponse(
            rewards=[
                RewardView(
                    reward=reward,
                    redeemed_in_period=redeemed_count(
                        state, reward, now, engine.settings
                    ),
                    can_redeem=can_redeem(state, reward, now, engine.settings),
                )
                for reward in self.reward_service.catalogue(state)
            ]
        )
