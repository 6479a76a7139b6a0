"""Journal entry repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lifequest.domain.model.journal import JournalEntry
from lifequest.domain.value import JournalEntryId, UserId


class JournalRepository(ABC):
    """Repository for journal entries."""

    @abstractmethod
    async def find_by_id(self, entry_id: JournalEntryId) -> Optional[JournalEntry]:
        """Find a journal entry by ID.

        Args:
            entry_id: The entry's unique identifier

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self, user_id: UserId, limit: int = 50, offset: int = 0
    ) -> List[JournalEntry]:
        """Find a user's entries, newest first.

        Args:
            user_id: The author's ID
            limit: Maximum number of entries
            offset: Number of entries to skip

        Returns:
            List of entries
        """
        pass

    @abstractmethod
    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save a journal entry.

        Args:
            entry: The entry to save

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: JournalEntryId) -> bool:
        """Delete a journal entry.

        Args:
            entry_id: The entry ID to delete

        Returns:
            True if an entry was deleted, False if none existed
        """
        pass
