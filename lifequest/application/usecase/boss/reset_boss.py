"""Reset boss use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.service import BossService
from lifequest.domain.value import UserId

from .get_boss import GetBossResponse


class ResetBossRequest(BaseModel):
    """Reset boss request."""

    user_id: UUID


class ResetBossUseCase:
    """Use case for restarting the current boss fight at full HP."""

    def __init__(self, boss_service: BossService) -> None:
        self.boss_service = boss_service

    async def execute(self, request: ResetBossRequest) -> GetBossResponse:
        """Restore the boss.

        Raises:
            NotFoundError: If no boss is assigned
        """
        boss = await self.boss_service.reset_boss(UserId(request.user_id))
        return GetBossResponse(boss=boss, defeated_this_week=False)
