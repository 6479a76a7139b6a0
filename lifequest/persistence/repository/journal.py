"""PostgreSQL implementation of Journal repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifequest.domain.model import JournalEntry
from lifequest.domain.repository import JournalRepository
from lifequest.domain.value import JournalEntryId, UserId
from lifequest.persistence.mappers import journal_entry_to_dict, row_to_journal_entry
from lifequest.persistence.tables import journal_entries_table


class PostgresJournalRepository(JournalRepository):
    """PostgreSQL implementation of JournalRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, entry_id: JournalEntryId) -> Optional[JournalEntry]:
        """Find a journal entry by ID."""
        stmt = select(journal_entries_table).where(
            journal_entries_table.c.id == entry_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_journal_entry(dict(row)) if row else None

    async def find_by_user(
        self, user_id: UserId, limit: int = 50, offset: int = 0
    ) -> List[JournalEntry]:
        """Find a user's entries, newest first."""
        stmt = (
            select(journal_entries_table)
            .where(journal_entries_table.c.user_id == user_id)
            .order_by(journal_entries_table.c.date.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_journal_entry(dict(row)) for row in result.mappings().all()]

    async def save(self, entry: JournalEntry) -> JournalEntry:
        """Save a journal entry."""
        entry_dict = journal_entry_to_dict(entry)

        if await self.find_by_id(entry.id):
            stmt = (
                update(journal_entries_table)
                .where(journal_entries_table.c.id == entry.id)
                .values(**entry_dict)
            )
        else:
            stmt = insert(journal_entries_table).values(**entry_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return entry

    async def delete(self, entry_id: JournalEntryId) -> bool:
        """Delete a journal entry."""
        stmt = delete(journal_entries_table).where(
            journal_entries_table.c.id == entry_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
