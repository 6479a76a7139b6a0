"""User routes: accounts, session start and skills."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from lifequest.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    GetUserStateRequest,
    GetUserStateResponse,
    GetUserStateUseCase,
    StartSessionRequest,
    StartSessionResponse,
    StartSessionUseCase,
    UpgradeSkillRequest,
    UpgradeSkillResponse,
    UpgradeSkillUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for creating an account."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    user_id: Optional[UUID] = None


@router.post("", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> CreateUserResponse:
    """Create an account with the default starting state.

    Args:
        request: Optional display name and client-chosen ID
        create_user_use_case: Create user use case from DI

    Returns:
        The new user state

    Example:
        POST /users
        {"name": "Ada"}
    """
    return await create_user_use_case.execute(
        CreateUserRequest(name=request.name, user_id=request.user_id)
    )


@router.get("/{user_id}", response_model=GetUserStateResponse)
async def get_user(
    user_id: UUID,
    get_user_state_use_case: FromDishka[GetUserStateUseCase],
) -> GetUserStateResponse:
    """Get the user's progression snapshot."""
    return await get_user_state_use_case.execute(GetUserStateRequest(user_id=user_id))


@router.post("/{user_id}/session", response_model=StartSessionResponse)
async def start_session(
    user_id: UUID,
    start_session_use_case: FromDishka[StartSessionUseCase],
) -> StartSessionResponse:
    """Start a session, running the daily rollover when a new day has begun.

    Clients call this when the app opens, before any other change that day.
    """
    return await start_session_use_case.execute(StartSessionRequest(user_id=user_id))


@router.post(
    "/{user_id}/skills/{tree_name}/{skill_name}", response_model=UpgradeSkillResponse
)
async def upgrade_skill(
    user_id: UUID,
    tree_name: str,
    skill_name: str,
    upgrade_skill_use_case: FromDishka[UpgradeSkillUseCase],
) -> UpgradeSkillResponse:
    """Spend skill points on a skill.

    Rejections (unknown skill, max level, not enough points) return 200 with
    ``success`` False.
    """
    return await upgrade_skill_use_case.execute(
        UpgradeSkillRequest(
            user_id=user_id, tree_name=tree_name, skill_name=skill_name
        )
    )
