"""Evaluator for serializable debuff effect descriptors."""

from lifequest.domain.model import UserState
from lifequest.domain.value import DebuffEffect, EffectKind


def evaluate_health_loss(effect: DebuffEffect | None, state: UserState) -> int:
    """HP a debuff effect drains for one day."""
    if effect is None:
        return 0
    if effect.kind is EffectKind.HEALTH_DRAIN:
        return effect.amount
    if effect.kind is EffectKind.HEALTH_DRAIN_PERCENT:
        return state.max_health * effect.amount // 100
    return 0
