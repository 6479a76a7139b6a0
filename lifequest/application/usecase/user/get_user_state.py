"""Get user state use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.application.usecase.base import BaseUseCase
from lifequest.domain.model import UserState
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import UserId


class GetUserStateRequest(BaseModel):
    """Get user state request."""

    user_id: UUID


class GetUserStateResponse(BaseModel):
    """Get user state response."""

    user: UserState


class GetUserStateUseCase(BaseUseCase):
    """Use case for reading a user's progression snapshot."""

    def __init__(self, engine: ProgressionEngine) -> None:
        self.engine = engine

    async def execute(self, request: GetUserStateRequest) -> GetUserStateResponse:
        state = await self.engine.get_user(UserId(request.user_id))
        return GetUserStateResponse(user=state)
