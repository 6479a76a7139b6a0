"""Quest routes."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from lifequest.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskResponse,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskUseCase,
    ListTasksRequest,
    ListTasksResponse,
    ListTasksUseCase,
    SetTaskCompletionRequest,
    SetTaskCompletionResponse,
    SetTaskCompletionUseCase,
)
from lifequest.domain.value import Difficulty, TaskCategory, TaskType

router = APIRouter(
    prefix="/users/{user_id}/tasks", tags=["tasks"], route_class=DishkaRoute
)


class CreateTaskAPIRequest(BaseModel):
    """API request for adding a quest."""

    title: str = Field(min_length=1, max_length=300)
    category: TaskCategory
    difficulty: Difficulty = Difficulty.NOT_APPLICABLE
    type: TaskType = TaskType.ONE_TIME
    xp: int = Field(default=0, ge=0)
    coins: int = Field(default=0, ge=0)
    description: Optional[str] = None
    intention: Optional[str] = None
    due_date: Optional[datetime] = None


class SetTaskCompletionAPIRequest(BaseModel):
    """API request for checking or unchecking a quest."""

    completed: bool


@router.post("", response_model=CreateTaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    user_id: UUID,
    request: CreateTaskAPIRequest,
    create_task_use_case: FromDishka[CreateTaskUseCase],
) -> CreateTaskResponse:
    """Add a quest to the user's log."""
    return await create_task_use_case.execute(
        CreateTaskRequest(user_id=user_id, **request.model_dump())
    )


@router.get("", response_model=ListTasksResponse)
async def list_tasks(
    user_id: UUID,
    list_tasks_use_case: FromDishka[ListTasksUseCase],
) -> ListTasksResponse:
    """List the user's quests, newest first."""
    return await list_tasks_use_case.execute(ListTasksRequest(user_id=user_id))


@router.put("/{task_id}/completion", response_model=SetTaskCompletionResponse)
async def set_task_completion(
    user_id: UUID,
    task_id: UUID,
    request: SetTaskCompletionAPIRequest,
    set_task_completion_use_case: FromDishka[SetTaskCompletionUseCase],
) -> SetTaskCompletionResponse:
    """Check or uncheck a quest.

    Completing a quest grants its XP and coins and damages the weekly boss.
    Unchecking takes the rewards back. Repeating the current state is a
    no-op reported with ``changed`` False.

    Example:
        PUT /users/{user_id}/tasks/{task_id}/completion
        {"completed": true}
    """
    return await set_task_completion_use_case.execute(
        SetTaskCompletionRequest(
            user_id=user_id, task_id=task_id, completed=request.completed
        )
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    user_id: UUID,
    task_id: UUID,
    delete_task_use_case: FromDishka[DeleteTaskUseCase],
) -> None:
    """Delete a quest. Rewards already earned are kept."""
    await delete_task_use_case.execute(DeleteTaskRequest(user_id=user_id, task_id=task_id))
