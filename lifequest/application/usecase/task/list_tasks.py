"""List tasks use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import Task
from lifequest.domain.service import QuestService
from lifequest.domain.value import UserId


class ListTasksRequest(BaseModel):
    """List tasks request."""

    user_id: UUID


class ListTasksResponse(BaseModel):
    """List tasks response."""

    tasks: list[Task]


class ListTasksUseCase:
    """Use case for listing the user's quests, newest first."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: ListTasksRequest) -> ListTasksResponse:
        tasks = await self.quest_service.list_tasks(UserId(request.user_id))
        return ListTasksResponse(tasks=tasks)
