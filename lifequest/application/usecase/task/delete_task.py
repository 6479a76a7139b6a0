"""Delete task use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.service import QuestService
from lifequest.domain.value import TaskId, UserId


class DeleteTaskRequest(BaseModel):
    """Delete task request."""

    user_id: UUID
    task_id: UUID


class DeleteTaskUseCase:
    """Use case for removing a quest. Rewards already earned are kept."""

    def __init__(self, quest_service: QuestService) -> None:
        self.quest_service = quest_service

    async def execute(self, request: DeleteTaskRequest) -> None:
        await self.quest_service.delete_task(
            UserId(request.user_id), TaskId(request.task_id)
        )
