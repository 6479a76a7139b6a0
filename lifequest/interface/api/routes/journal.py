"""Journal routes."""

from typing import Optional
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from lifequest.application.usecase.journal import (
    AddJournalEntryRequest,
    AddJournalEntryResponse,
    AddJournalEntryUseCase,
    DeleteJournalEntryRequest,
    DeleteJournalEntryResponse,
    DeleteJournalEntryUseCase,
    ListJournalEntriesRequest,
    ListJournalEntriesResponse,
    ListJournalEntriesUseCase,
)

router = APIRouter(
    prefix="/users/{user_id}/journal", tags=["journal"], route_class=DishkaRoute
)


class AddJournalEntryAPIRequest(BaseModel):
    """API request for writing a journal entry."""

    text: Optional[str] = Field(default=None, max_length=20000)
    image_url: Optional[str] = None


@router.post(
    "", response_model=AddJournalEntryResponse, status_code=status.HTTP_201_CREATED
)
async def add_journal_entry(
    user_id: UUID,
    request: AddJournalEntryAPIRequest,
    add_journal_entry_use_case: FromDishka[AddJournalEntryUseCase],
) -> AddJournalEntryResponse:
    """Write a journal entry and earn the journaling reward."""
    return await add_journal_entry_use_case.execute(
        AddJournalEntryRequest(
            user_id=user_id, text=request.text, image_url=request.image_url
        )
    )


@router.get("", response_model=ListJournalEntriesResponse)
async def list_journal_entries(
    user_id: UUID,
    list_journal_entries_use_case: FromDishka[ListJournalEntriesUseCase],
    limit: int = Query(default=50, ge=1, le=200),
    offset: int = Query(default=0, ge=0),
) -> ListJournalEntriesResponse:
    """List the user's entries, newest first."""
    return await list_journal_entries_use_case.execute(
        ListJournalEntriesRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.delete("/{entry_id}", response_model=DeleteJournalEntryResponse)
async def delete_journal_entry(
    user_id: UUID,
    entry_id: UUID,
    delete_journal_entry_use_case: FromDishka[DeleteJournalEntryUseCase],
) -> DeleteJournalEntryResponse:
    """Delete an entry.

    Entries deleted within an hour of being written cost XP and coins,
    and the cost doubles with each further rapid deletion.
    """
    return await delete_journal_entry_use_case.execute(
        DeleteJournalEntryRequest(user_id=user_id, entry_id=entry_id)
    )
