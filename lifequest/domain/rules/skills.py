"""Skill tree upgrades paid with skill points."""

from dataclasses import dataclass
from enum import Enum

from lifequest.domain.model import UserState


class SkillUpgradeOutcome(str, Enum):
    UPGRADED = "upgraded"
    UNKNOWN_SKILL = "unknown_skill"
    MAX_LEVEL = "max_level"
    INSUFFICIENT_POINTS = "insufficient_points"


@dataclass(frozen=True)
class SkillUpgrade:
    state: UserState
    outcome: SkillUpgradeOutcome

    @property
    def success(self) -> bool:
        return self.outcome is SkillUpgradeOutcome.UPGRADED


def level_up_skill(state: UserState, tree_name: str, skill_name: str) -> SkillUpgrade:
    """Spend skill points to raise one skill by a level."""
    tree = next((t for t in state.skill_trees if t.name == tree_name), None)
    skill = (
        next((s for s in tree.skills if s.name == skill_name), None) if tree else None
    )
    if tree is None or skill is None:
        return SkillUpgrade(state=state, outcome=SkillUpgradeOutcome.UNKNOWN_SKILL)
    if skill.level >= skill.max_level:
        return SkillUpgrade(state=state, outcome=SkillUpgradeOutcome.MAX_LEVEL)
    if state.skill_points < skill.cost:
        return SkillUpgrade(
            state=state, outcome=SkillUpgradeOutcome.INSUFFICIENT_POINTS
        )

    trees = [
        t.model_copy(
            update={
                "skills": [
                    s.model_copy(update={"level": s.level + 1})
                    if s.name == skill_name
                    else s
                    for s in t.skills
                ]
            }
        )
        if t.name == tree_name
        else t
        for t in state.skill_trees
    ]
    return SkillUpgrade(
        state=state.model_copy(
            update={
                "skill_points": state.skill_points - skill.cost,
                "skill_trees": trees,
            }
        ),
        outcome=SkillUpgradeOutcome.UPGRADED,
    )
