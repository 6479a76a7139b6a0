"""Delete journal entry use case."""

from uuid import UUID

from pydantic import BaseModel

from lifequest.domain.model import UserState
from lifequest.domain.service import JournalService
from lifequest.domain.value import JournalEntryId, UserId


class DeleteJournalEntryRequest(BaseModel):
    """Delete journal entry request."""

    user_id: UUID
    entry_id: UUID


class DeleteJournalEntryResponse(BaseModel):
    """Delete journal entry response.

    Penalties are zero when the entry was older than the deletion window.
    """

    penalty_applied: bool
    xp_penalty: int
    coin_penalty: int
    coins_applied: bool
    user: UserState


class DeleteJournalEntryUseCase:
    """Use case for deleting a journal entry."""

    def __init__(self, journal_service: JournalService) -> None:
        self.journal_service = journal_service

    async def execute(
        self, request: DeleteJournalEntryRequest
    ) -> DeleteJournalEntryResponse:
        """Delete the entry and charge the rapid-deletion penalty.

        Raises:
            NotFoundError: If the entry does not exist
            NotOwnerError: If the entry belongs to another user
        """
        deletion = await self.journal_service.delete_entry(
            UserId(request.user_id), JournalEntryId(request.entry_id)
        )
        penalty = deletion.penalty
        return DeleteJournalEntryResponse(
            penalty_applied=penalty.applies,
            xp_penalty=penalty.xp_penalty,
            coin_penalty=penalty.coin_penalty,
            coins_applied=deletion.coins_applied,
            user=deletion.state,
        )
