"""User state repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lifequest.domain.model.user import UserState
from lifequest.domain.value import UserId


class UserStateRepository(ABC):
    """Repository for the UserState aggregate.

    The whole snapshot is read and written as one document keyed by user id.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserState]:
        """Find a user's state by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The state if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, state: UserState) -> UserState:
        """Save a user's state (create or replace).

        Args:
            state: The snapshot to store

        Returns:
            The saved state
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user's state.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if a state was deleted, False if none existed
        """
        pass
