"""Journal use cases."""

from .add_journal_entry import (
    AddJournalEntryRequest,
    AddJournalEntryResponse,
    AddJournalEntryUseCase,
)
from .delete_journal_entry import (
    DeleteJournalEntryRequest,
    DeleteJournalEntryResponse,
    DeleteJournalEntryUseCase,
)
from .list_journal_entries import (
    ListJournalEntriesRequest,
    ListJournalEntriesResponse,
    ListJournalEntriesUseCase,
)

__all__ = [
    "AddJournalEntryRequest",
    "AddJournalEntryResponse",
    "AddJournalEntryUseCase",
    "DeleteJournalEntryRequest",
    "DeleteJournalEntryResponse",
    "DeleteJournalEntryUseCase",
    "ListJournalEntriesRequest",
    "ListJournalEntriesResponse",
    "ListJournalEntriesUseCase",
]
