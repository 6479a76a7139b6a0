"""Reward shop routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from lifequest.application.usecase.reward import (
    AddCustomRewardRequest,
    AddCustomRewardResponse,
    AddCustomRewardUseCase,
    DeleteCustomRewardRequest,
    DeleteCustomRewardUseCase,
    ListRewardsRequest,
    ListRewardsResponse,
    ListRewardsUseCase,
    RedeemRewardRequest,
    RedeemRewardResponse,
    RedeemRewardUseCase,
)
from lifequest.domain.value import RedeemPeriod

router = APIRouter(
    prefix="/users/{user_id}/rewards", tags=["rewards"], route_class=DishkaRoute
)


class AddCustomRewardAPIRequest(BaseModel):
    """API request for adding a custom reward."""

    title: str = Field(min_length=1, max_length=255)
    description: str = ""
    coin_cost: Optional[int] = Field(default=None, ge=0)
    gem_cost: Optional[int] = Field(default=None, ge=0)
    redeem_limit: Optional[int] = Field(default=None, ge=0)
    redeem_period: Optional[RedeemPeriod] = None


@router.get("", response_model=ListRewardsResponse)
async def list_rewards(
    user_id: UUID,
    list_rewards_use_case: FromDishka[ListRewardsUseCase],
) -> ListRewardsResponse:
    """List built-in and custom rewards with the user's redemption standing."""
    return await list_rewards_use_case.execute(ListRewardsRequest(user_id=user_id))


@router.post("/{reward_id}/redeem", response_model=RedeemRewardResponse)
async def redeem_reward(
    user_id: UUID,
    reward_id: str,
    redeem_reward_use_case: FromDishka[RedeemRewardUseCase],
) -> RedeemRewardResponse:
    """Redeem a reward.

    Limit, level and balance rejections return 200 with ``success`` False
    and the rejection in ``outcome``.
    """
    return await redeem_reward_use_case.execute(
        RedeemRewardRequest(user_id=user_id, reward_id=reward_id)
    )


@router.post(
    "", response_model=AddCustomRewardResponse, status_code=status.HTTP_201_CREATED
)
async def add_custom_reward(
    user_id: UUID,
    request: AddCustomRewardAPIRequest,
    add_custom_reward_use_case: FromDishka[AddCustomRewardUseCase],
) -> AddCustomRewardResponse:
    """Add a user-defined reward."""
    return await add_custom_reward_use_case.execute(
        AddCustomRewardRequest(user_id=user_id, **request.model_dump())
    )


@router.delete("/{reward_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_reward(
    user_id: UUID,
    reward_id: str,
    delete_custom_reward_use_case: FromDishka[DeleteCustomRewardUseCase],
) -> None:
    """Delete a user-defined reward. Built-in rewards cannot be deleted."""
    await delete_custom_reward_use_case.execute(
        DeleteCustomRewardRequest(user_id=user_id, reward_id=reward_id)
    )
