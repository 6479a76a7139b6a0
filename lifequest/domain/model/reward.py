"""Reward shop entities."""

from typing import Optional

from pydantic import Field

from lifequest.domain.model.common import DomainModel
from lifequest.domain.value import (
    ItemId,
    ItemType,
    Rarity,
    RedeemPeriod,
    RewardCategory,
    RewardId,
)


class Item(DomainModel):
    """Inventory item, granted by some rewards."""

    id: ItemId
    name: str
    type: ItemType = ItemType.COLLECTIBLE
    bonus: str = ""
    rarity: Rarity = Rarity.COMMON


class RewardItem(DomainModel):
    """A reward the user can buy with coins and/or gems.

    A reward without ``redeem_period`` has no redemption limit.
    """

    id: RewardId
    title: str
    description: str = ""
    coin_cost: Optional[int] = Field(default=None, ge=0)
    gem_cost: Optional[int] = Field(default=None, ge=0)
    category: RewardCategory = RewardCategory.CUSTOM
    level_requirement: int = Field(default=0, ge=0)
    redeem_limit: Optional[int] = Field(default=None, ge=0)
    redeem_period: Optional[RedeemPeriod] = None
    item: Optional[Item] = None
