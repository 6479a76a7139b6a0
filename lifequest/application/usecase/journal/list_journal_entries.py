"""List journal entries use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from lifequest.domain.model import JournalEntry
from lifequest.domain.service import JournalService
from lifequest.domain.value import UserId


class ListJournalEntriesRequest(BaseModel):
    """List journal entries request."""

    user_id: UUID
    limit: int = Field(default=50, ge=1, le=200)
    offset: int = Field(default=0, ge=0)


class ListJournalEntriesResponse(BaseModel):
    """List journal entries response."""

    entries: list[JournalEntry]


class ListJournalEntriesUseCase:
    def __init__(self, journal_service: JournalService) -> None:
        self.journal_service = journal_service

    async def execute(
        self, request: ListJournalEntriesRequest
    ) -> ListJournalEntriesResponse:
        entries = await self.journal_service.list_entries(
            UserId(request.user_id), request.limit, request.offset
        )
        return ListJournalEntriesResponse(entries=entries)
