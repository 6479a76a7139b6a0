"""Set task completion use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import Boss, Task, UserState
from lifequest.domain.service import QuestService
from lifequest.domain.value import HitKind, TaskId, UserId


class SetTaskCompletionRequest(BaseModel):
    """Set task completion request."""

    user_id: UUID
    task_id: UUID
    completed: bool


class BossHitView(BaseModel):
    """Boss reaction to a completed quest."""

    damage: int
    hit_kind: HitKind
    defeated: bool
    boss: Boss


class SetTaskCompletionResponse(BaseModel):
    """Set task completion response.

    ``changed`` is False when the quest was already in the requested state.
    """

    changed: bool
    coins_applied: bool
    levels_gained: list[int]
    levels_lost: list[int]
    task: Task
    user: UserState
    boss_hit: Optional[BossHitView] = None


class SetTaskCompletionUseCase:
    """Use case for checking or unchecking a quest."""

    def __init__(self, quest_service: QuestService) -> None:
        """Initialize set task completion use case.

        Args:
            quest_service: Quest domain service
        """
        self.quest_service = quest_service

    async def execute(
        self, request: SetTaskCompletionRequest
    ) -> SetTaskCompletionResponse:
        """Toggle the quest and report rewards and boss damage.

        Args:
            request: Request with the quest and requested state

        Returns:
            Updated quest, user state and boss hit

        Raises:
            NotFoundError: If the user or quest does not exist
            NotOwnerError: If the quest belongs to another user
        """
        outcome = await self.quest_service.set_completion(
            UserId(request.user_id), TaskId(request.task_id), request.completed
        )
        hit = outcome.boss_hit
        return SetTaskCompletionResponse(
            changed=outcome.changed,
            coins_applied=outcome.coins_applied,
            levels_gained=outcome.levels_gained,
            levels_lost=outcome.levels_lost,
            task=outcome.task,
            user=outcome.state,
            boss_hit=BossHitView(
                damage=hit.damage,
                hit_kind=hit.hit_kind,
                defeated=hit.defeated,
                boss=hit.boss,
            )
            if hit
            else None,
        )
