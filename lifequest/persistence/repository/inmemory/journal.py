"""In-memory journal repository for testing."""

from typing import List, Optional

from lifequest.domain.model import JournalEntry
from lifequest.domain.repository import JournalRepository
from lifequest.domain.value import JournalEntryId, UserId


class InMemoryJournalRepository(JournalRepository):
    """In-memory implementation of JournalRepository for testing."""

    def __init__(self) -> None:
        self._entries: dict[JournalEntryId, JournalEntry] = {}

    async def find_by_id(self, entry_id: JournalEntryId) -> Optional[JournalEntry]:
        """Find a journal entry by ID."""
        return self._entries.get(entry_id)

    async def find_by_user(
        self, user_id: UserId, limit: int = 50, offset: int = 0
    ) -> List[JournalEntry]:
        """Find a user's entries, newest first."""
        entries = [e for e in self._entries.values() if e.user_id == user_id]
        entries.sort(key=lambda e: e.date, reverse=True)
        return entries[offset : offset + limit]

    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save a journal entry."""
        self._entries[entry.id] = entry
        return entry

    async def delete(self, entry_id: JournalEntryId) -> bool:
        """Delete a journal entry."""
        return self._entries.pop(entry_id, None) is not None
