"""Get boss use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.error import NotFoundError
from lifequest.domain.model import Boss
from lifequest.domain.service import BossService
from lifequest.domain.value import UserId


class GetBossRequest(BaseModel):
    """Get boss request."""

    user_id: UUID


class GetBossResponse(BaseModel):
    """Get boss response."""

    boss: Boss
    defeated_this_week: bool


class GetBossUseCase:
    """Use case for showing this week's boss."""

    def __init__(self, boss_service: BossService) -> None:
        self.boss_service = boss_service

    async def execute(self, request: GetBossRequest) -> GetBossResponse:
        """Get the boss in play, respawning it if it fell in an earlier week.

        Raises:
            NotFoundError: If no boss is assigned
        """
        user_id = UserId(request.user_id)
        boss = await self.boss_service.current_boss(user_id)
        if boss is None:
            raise NotFoundError("Boss", str(user_id))
        return GetBossResponse(boss=boss, defeated_this_week=boss.is_defeated)
