"""Weekly boss routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, Field

from lifequest.application.usecase.boss import (
    AssignBossRequest,
    AssignBossResponse,
    AssignBossUseCase,
    GetBossRequest,
    GetBossResponse,
    GetBossUseCase,
    ResetBossRequest,
    ResetBossUseCase,
)
from lifequest.domain.value import BossRewards, TaskCategory

router = APIRouter(prefix="/users/{user_id}/boss", tags=["boss"], route_class=DishkaRoute)


class AssignBossAPIRequest(BaseModel):
    """API request for assigning a new boss."""

    name: str = Field(min_length=1, max_length=255)
    title: str = ""
    max_hp: int = Field(gt=0)
    resistances: dict[TaskCategory, float] = Field(default_factory=dict)
    rewards: Optional[BossRewards] = None


@router.get("", response_model=GetBossResponse)
async def get_boss(
    user_id: UUID,
    get_boss_use_case: FromDishka[GetBossUseCase],
) -> GetBossResponse:
    """Get this week's boss. 404 when no boss has been assigned."""
    return await get_boss_use_case.execute(GetBossRequest(user_id=user_id))


@router.put("", response_model=AssignBossResponse)
async def assign_boss(
    user_id: UUID,
    request: AssignBossAPIRequest,
    assign_boss_use_case: FromDishka[AssignBossUseCase],
) -> AssignBossResponse:
    """Replace the user's boss with a fresh one at full HP.

    Example:
        PUT /users/{user_id}/boss
        {"name": "Procrastination Dragon", "max_hp": 500,
         "resistances": {"Education": 0.5, "Health": 2.0}}
    """
    return await assign_boss_use_case.execute(
        AssignBossRequest(user_id=user_id, **request.model_dump())
    )


@router.post("/reset", response_model=GetBossResponse)
async def reset_boss(
    user_id: UUID,
    reset_boss_use_case: FromDishka[ResetBossUseCase],
) -> GetBossResponse:
    """Restore the current boss to full HP."""
    return await reset_boss_use_case.execute(ResetBossRequest(user_id=user_id))
