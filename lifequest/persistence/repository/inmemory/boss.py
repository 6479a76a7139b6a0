"""In-memory boss repository for testing."""

from typing import Optional

from lifequest.domain.model import Boss
from lifequest.domain.repository import BossRepository
from lifequest.domain.value import UserId


class InMemoryBossRepository(BossRepository):
    """In-memory implementation of BossRepository for testing."""

    def __init__(self) -> None:
        self._bosses: dict[UserId, Boss] = {}

    async def find_by_user(self, user_id: UserId) -> Optional[Boss]:
        """Find the boss currently assigned to a user."""
        return self._bosses.get(user_id)

    async def save(self, boss: Boss) -> Boss:
        """Save the user's boss, replacing any previous one."""
        self._bosses[boss.user_id] = boss
        return boss
