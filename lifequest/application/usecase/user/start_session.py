"""Start session use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.application.usecase.base import BaseUseCase
from lifequest.domain.model import Debuff, Task, UserState
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import UserId


class StartSessionRequest(BaseModel):
    """Start session request."""

    user_id: UUID


class StartSessionResponse(BaseModel):
    """Start session response.

    ``rollover_applied`` is False when the session started on the same
    calendar day as the previous one.
    """

    user: UserState
    rollover_applied: bool
    health_penalty: int
    missed_dailies: list[Task]
    expired_debuffs: list[Debuff]
    exhausted: bool


class StartSessionUseCase(BaseUseCase):
    """Use case for the daily rollover barrier run when the app opens."""

    def __init__(self, engine: ProgressionEngine) -> None:
        """Initialize start session use case.

        Args:
            engine: Progression engine
        """
        self.engine = engine

    async def execute(self, request: StartSessionRequest) -> StartSessionResponse:
        """Run the rollover if a new day has started.

        Args:
            request: Request with the user ID

        Returns:
            Rollover summary and the current state

        Raises:
            NotFoundError: If the user does not exist
        """
        result = await self.engine.start_session(UserId(request.user_id))
        return StartSessionResponse(
            user=result.state,
            rollover_applied=result.applied,
            health_penalty=result.health_penalty,
            missed_dailies=result.missed_dailies,
            expired_debuffs=result.expired_debuffs,
            exhausted=result.exhausted,
        )
