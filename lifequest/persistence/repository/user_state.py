"""PostgreSQL implementation of UserState repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifequest.domain.model import UserState
from lifequest.domain.repository import UserStateRepository
from lifequest.domain.value import UserId
from lifequest.persistence.mappers import row_to_user_state, user_state_to_dict
from lifequest.persistence.tables import user_states_table


class PostgresUserStateRepository(UserStateRepository):
    """PostgreSQL implementation of UserStateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[UserState]:
        """Find a user's state by ID."""
        stmt = select(user_states_table).where(user_states_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_state(dict(row)) if row else None

    async def save(self, state: UserState) -> UserState:
        """Save a user's state (create or replace)."""
        state_dict = user_state_to_dict(state)

        existing = await self.session.execute(
            select(user_states_table.c.id).where(user_states_table.c.id == state.id)
        )
        if existing.first():
            stmt = (
                update(user_states_table)
                .where(user_states_table.c.id == state.id)
                .values(**state_dict)
            )
        else:
            stmt = insert(user_states_table).values(**state_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return state

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user's state (tasks, boss and journal cascade)."""
        stmt = delete(user_states_table).where(user_states_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
