"""PostgreSQL implementation of Boss repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifequest.domain.model import Boss
from lifequest.domain.repository import BossRepository
from lifequest.domain.value import UserId
from lifequest.persistence.mappers import boss_to_dict, row_to_boss
from lifequest.persistence.tables import bosses_table


class PostgresBossRepository(BossRepository):
    """PostgreSQL implementation of BossRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[Boss]:
        """Find the boss currently assigned to a user."""
        stmt = select(bosses_table).where(bosses_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_boss(dict(row)) if row else None

    async def save(self, boss: Boss) -> Boss:
        """Save the user's boss, replacing any previous one."""
        boss_dict = boss_to_dict(boss)

        if await self.find_by_user(boss.user_id):
            stmt = (
                update(bosses_table)
                .where(bosses_table.c.user_id == boss.user_id)
                .values(**boss_dict)
            )
        else:
            stmt = insert(bosses_table).values(**boss_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return boss
