"""Redeem reward use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import UserState
from lifequest.domain.rules import RedemptionOutcome
from lifequest.domain.service import RewardService
from lifequest.domain.value import RewardId, UserId


class RedeemRewardRequest(BaseModel):
    """Redeem reward request."""

    user_id: UUID
    reward_id: str


class RedeemRewardResponse(BaseModel):
    """Redeem reward response. Rejections come back with ``success`` False."""

    success: bool
    outcome: RedemptionOutcome
    user: UserState


class RedeemRewardUseCase:
    """Use case for buying a reward."""

    def __init__(self, reward_service: RewardService) -> None:
        """Initialize redeem reward use case.

        Args:
            reward_service: Reward domain service
        """
        self.reward_service = reward_service

    async def execute(self, request: RedeemRewardRequest) -> RedeemRewardResponse:
        """Redeem the reward if limits, level and funds allow it.

        Raises:
            NotFoundError: If the user or reward does not exist
        """
        result = await self.reward_service.redeem_reward(
            UserId(request.user_id), RewardId(request.reward_id)
        )
        return RedeemRewardResponse(
            success=result.success, outcome=result.outcome, user=result.state
        )
