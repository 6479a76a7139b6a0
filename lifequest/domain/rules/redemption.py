"""Reward redemption with per-period limits."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from lifequest.config import ProgressionSettings
from lifequest.domain.model import RedeemedReward, RewardItem, UserState
from lifequest.domain.rules.calendar import period_start
from lifequest.domain.rules.currency import (
    LedgerResult,
    apply_coin_delta,
    apply_gem_delta,
)
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS


class RedemptionOutcome(str, Enum):
    """Result of a redemption check or attempt."""

    REDEEMED = "redeemed"
    LIMIT_REACHED = "limit_reached"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    LEVEL_TOO_LOW = "level_too_low"


@dataclass(frozen=True)
class RedemptionResult:
    """Outcome of a redemption. State is unchanged unless redeemed."""

    state: UserState
    outcome: RedemptionOutcome

    @property
    def success(self) -> bool:
        return self.outcome is RedemptionOutcome.REDEEMED


def redeemed_count(
    state: UserState,
    reward: RewardItem,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> int:
    """Redemptions of ``reward`` inside its current period window.

    Rewards without a redemption period are unlimited and always count 0.
    """
    if reward.redeem_period is None:
        return 0
    log = next((r for r in state.redeemed_rewards if r.reward_id == reward.id), None)
    if log is None:
        return 0
    start = period_start(
        reward.redeem_period, now, settings.week_start, settings.timezone
    )
    return sum(1 for ts in log.timestamps if start <= ts <= now)


def _charge(state: UserState, reward: RewardItem) -> LedgerResult:
    """Spend the reward's price. A gem cost takes precedence over a coin cost."""
    if reward.gem_cost:
        return apply_gem_delta(state, -reward.gem_cost)
    return apply_coin_delta(state, -(reward.coin_cost or 0))


def check_redemption(
    state: UserState,
    reward: RewardItem,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> RedemptionOutcome:
    """Decide whether the reward could be redeemed right now."""
    if state.level < reward.level_requirement:
        return RedemptionOutcome.LEVEL_TOO_LOW
    if (
        reward.redeem_period is not None
        and reward.redeem_limit is not None
        and redeemed_count(state, reward, now, settings) >= reward.redeem_limit
    ):
        return RedemptionOutcome.LIMIT_REACHED
    if not _charge(state, reward).success:
        return RedemptionOutcome.INSUFFICIENT_FUNDS
    return RedemptionOutcome.REDEEMED


def can_redeem(
    state: UserState,
    reward: RewardItem,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> bool:
    return check_redemption(state, reward, now, settings) is RedemptionOutcome.REDEEMED


def redeem(
    state: UserState,
    reward: RewardItem,
    now: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> RedemptionResult:
    """Spend the reward's cost, log the redemption and grant its item."""
    outcome = check_redemption(state, reward, now, settings)
    if outcome is not RedemptionOutcome.REDEEMED:
        return RedemptionResult(state=state, outcome=outcome)

    redeemed: list[RedeemedReward] = []
    logged = False
    for entry in state.redeemed_rewards:
        if entry.reward_id == reward.id:
            entry = entry.model_copy(update={"timestamps": [*entry.timestamps, now]})
            logged = True
        redeemed.append(entry)
    if not logged:
        redeemed.append(RedeemedReward(reward_id=reward.id, timestamps=[now]))

    charged = _charge(state, reward).state
    update = {"redeemed_rewards": redeemed}
    if reward.item is not None:
        update["inventory"] = [*charged.inventory, reward.item]

    return RedemptionResult(
        state=charged.model_copy(update=update), outcome=RedemptionOutcome.REDEEMED
    )
