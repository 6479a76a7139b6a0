"""Upgrade skill use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.application.usecase.base import BaseUseCase
from lifequest.domain.model import UserState
from lifequest.domain.rules import SkillUpgradeOutcome
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import UserId


class UpgradeSkillRequest(BaseModel):
    """Upgrade skill request."""

    user_id: UUID
    tree_name: str
    skill_name: str


class UpgradeSkillResponse(BaseModel):
    """Upgrade skill response. Rejections come back with ``success`` False."""

    success: bool
    outcome: SkillUpgradeOutcome
    user: UserState


class UpgradeSkillUseCase(BaseUseCase):
    """Use case for spending skill points."""

    def __init__(self, engine: ProgressionEngine) -> None:
        self.engine = engine

    async def execute(self, request: UpgradeSkillRequest) -> UpgradeSkillResponse:
        upgrade = await self.engine.upgrade_skill(
            UserId(request.user_id), request.tree_name, request.skill_name
        )
        return UpgradeSkillResponse(
            success=upgrade.success, outcome=upgrade.outcome, user=upgrade.state
        )
