"""Reward use cases."""

from .list_rewards import (
    ListRewardsRequest,
    ListRewardsResponse,
    ListRewardsUseCase,
    RewardView,
)
from .manage_custom_rewards import (
    AddCustomRewardRequest,
    AddCustomRewardResponse,
    AddCustomRewardUseCase,
    DeleteCustomRewardRequest,
    DeleteCustomRewardUseCase,
)
from .redeem_reward import (
    RedeemRewardRequest,
    RedeemRewardResponse,
    RedeemRewardUseCase,
)

__all__ = [
    "ListRewardsRequest",
    "ListRewardsResponse",
    "ListRewardsUseCase",
    "RewardView",
    "AddCustomRewardRequest",
    "AddCustomRewardResponse",
    "AddCustomRewardUseCase",
    "DeleteCustomRewardRequest",
    "DeleteCustomRewardUseCase",
    "RedeemRewardRequest",
    "RedeemRewardResponse",
    "RedeemRewardUseCase",
]
