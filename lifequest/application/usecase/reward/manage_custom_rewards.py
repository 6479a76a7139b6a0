"""Custom reward use cases."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from lifequest.domain.model import RewardItem
from lifequest.domain.service import RewardService
from lifequest.domain.value import RedeemPeriod, RewardId, UserId


class AddCustomRewardRequest(BaseModel):
    """Add custom reward request. At least one cost is required."""

    user_id: UUID
    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    coin_cost: Optional[int] = Field(default=None, ge=0)
    gem_cost: Optional[int] = Field(default=None, ge=0)
    redeem_limit: Optional[int] = Field(default=None, ge=0)
    redeem_period: Optional[RedeemPeriod] = None

    @model_validator(mode="after")
    def check_cost(self) -> "AddCustomRewardRequest":
        if self.coin_cost is None and self.gem_cost is None:
            raise ValueError("A reward needs a coin cost or a gem cost")
        return self


class AddCustomRewardResponse(BaseModel):
    """Add custom reward response."""

    reward: RewardItem


class AddCustomRewardUseCase:
    """Use case for adding a user-defined reward."""

    def __init__(self, reward_service: RewardService) -> None:
        self.reward_service = reward_service

    async def execute(self, request: AddCustomRewardRequest) -> AddCustomRewardResponse:
        reward = await self.reward_service.add_custom_reward(
            user_id=UserId(request.user_id),
            title=request.title,
            description=request.description,
            coin_cost=request.coin_cost,
            gem_cost=request.gem_cost,
            redeem_limit=request.redeem_limit,
            redeem_period=request.redeem_period,
        )
        return AddCustomRewardResponse(reward=reward)


class DeleteCustomRewardRequest(BaseModel):
    """Delete custom reward request."""

    user_id: UUID
    reward_id: str


class DeleteCustomRewardUseCase:
    """Use case for removing a user-defined reward."""

    def __init__(self, reward_service: RewardService) -> None:
        self.reward_service = reward_service

    async def execute(self, request: DeleteCustomRewardRequest) -> None:
        """Delete the reward.

        Raises:
            NotFoundError: If the user has no such custom reward
        """
        await self.reward_service.delete_custom_reward(
            UserId(request.user_id), RewardId(request.reward_id)
        )
