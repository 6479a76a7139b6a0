"""Create user use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from lifequest.application.usecase.base import BaseUseCase
from lifequest.domain.model import UserState
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import UserId


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    user_id: Optional[UUID] = None  # Client-chosen ID, generated when omitted


class CreateUserResponse(BaseModel):
    """Create user response."""

    user: UserState


class CreateUserUseCase(BaseUseCase):
    """Use case for opening a new account with the default starting state."""

    def __init__(self, engine: ProgressionEngine) -> None:
        """Initialize create user use case.

        Args:
            engine: Progression engine
        """
        self.engine = engine

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Create the account.

        Raises:
            BusinessRuleViolationError: If the requested ID is taken
        """
        user_id = UserId(request.user_id) if request.user_id else None
        state = await self.engine.create_user(name=request.name, user_id=user_id)
        return CreateUserResponse(user=state)
