"""Assign boss use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from lifequest.domain.model import Boss
from lifequest.domain.service import BossService
from lifequest.domain.value import BossRewards, TaskCategory, UserId


class AssignBossRequest(BaseModel):
    """Assign boss request."""

    user_id: UUID
    name: str = Field(min_length=1, max_length=255)
    title: str = ""
    max_hp: int = Field(gt=0)
    resistances: dict[TaskCategory, float] = Field(default_factory=dict)
    rewards: Optional[BossRewards] = None


class AssignBossResponse(BaseModel):
    """Assign boss response."""

    boss: Boss


class AssignBossUseCase:
    """Use case for starting a new boss fight."""

    def __init__(self, boss_service: BossService) -> None:
        """Initialize assign boss use case.

        Args:
            boss_service: Boss domain service
        """
        self.boss_service = boss_service

    async def execute(self, request: AssignBossRequest) -> AssignBossResponse:
        """Replace the user's boss with a fresh one at full HP.

        Raises:
            NotFoundError: If the user does not exist
        """
        boss = await self.boss_service.assign_boss(
            user_id=UserId(request.user_id),
            name=request.name,
            title=request.title,
            max_hp=request.max_hp,
            resistances=request.resistances,
            rewards=request.rewards,
        )
        return AssignBossResponse(boss=boss)
