"""Create task use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from lifequest.domain.model import Task
from lifequest.domain.service import QuestService
from lifequest.domain.value import Difficulty, TaskCategory, TaskType, UserId


class CreateTaskRequest(BaseModel):
    """Create task request."""

    user_id: UUID
    title: str = Field(min_length=1, max_length=300)
    category: TaskCategory
    difficulty: Difficulty = Difficulty.NOT_APPLICABLE
    type: TaskType = TaskType.ONE_TIME
    xp: int = Field(default=0, ge=0)
    coins: int = Field(default=0, ge=0)
    description: Optional[str] = None
    intention: Optional[str] = None
    due_date: Optional[datetime] = None


class CreateTaskResponse(BaseModel):
    """Create task response."""

    task: Task


class CreateTaskUseCase:
    """Use case for adding a quest to the user's log."""

    def __init__(self, quest_service: QuestService) -> None:
        """Initialize create task use case.

        Args:
            quest_service: Quest domain service
        """
        self.quest_service = quest_service

    async def execute(self, request: CreateTaskRequest) -> CreateTaskResponse:
        """Create the quest.

        Raises:
            NotFoundError: If the user does not exist
        """
        task = await self.quest_service.create_task(
            user_id=UserId(request.user_id),
            title=request.title,
            category=request.category,
            difficulty=request.difficulty,
            type=request.type,
            xp=request.xp,
            coins=request.coins,
            description=request.description,
            intention=request.intention,
            due_date=request.due_date,
        )
        return CreateTaskResponse(task=task)
