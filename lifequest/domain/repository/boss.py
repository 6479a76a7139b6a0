"""Boss repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lifequest.domain.model.boss import Boss
from lifequest.domain.value import UserId


class BossRepository(ABC):
    """Repository for the user's current boss (one per user)."""

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Boss]:
        """Find the boss currently assigned to a user.

        Args:
            user_id: The user's ID

        Returns:
            The boss if one is assigned, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, boss: Boss) -> Boss:
        """Save the user's boss, replacing any previous one.

        Args:
            boss: The boss to save

        Returns:
            The saved boss
        """
        pass
