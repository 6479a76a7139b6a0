"""Add journal entry use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from lifequest.domain.model import JournalEntry, UserState
from lifequest.domain.service import JournalService
from lifequest.domain.value import UserId


class AddJournalEntryRequest(BaseModel):
    """Add journal entry request. Needs text, an image, or both."""

    user_id: UUID
    text: Optional[str] = Field(default=None, max_length=20000)
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def check_content(self) -> "AddJournalEntryRequest":
        if not (self.text and self.text.strip()) and not self.image_url:
            raise ValueError("A journal entry needs text or an image")
        return self


class AddJournalEntryResponse(BaseModel):
    """Add journal entry response."""

    entry: JournalEntry
    user: UserState


class AddJournalEntryUseCase:
    """Use case for writing a journal entry."""

    def __init__(self, journal_service: JournalService) -> None:
        """Initialize add journal entry use case.

        Args:
            journal_service: Journal domain service
        """
        self.journal_service = journal_service

    async def execute(self, request: AddJournalEntryRequest) -> AddJournalEntryResponse:
        """Store the entry and grant the journaling reward.

        Raises:
            NotFoundError: If the user does not exist
        """
        entry, state = await self.journal_service.add_entry(
            UserId(request.user_id), request.text, request.image_url
        )
        return AddJournalEntryResponse(entry=entry, user=state)
