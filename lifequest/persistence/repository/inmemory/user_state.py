"""In-memory user state repository for testing."""

from typing import Optional

from lifequest.domain.model import UserState
from lifequest.domain.repository import UserStateRepository
from lifequest.domain.value import UserId


class InMemoryUserStateRepository(UserStateRepository):
    """In-memory implementation of UserStateRepository for testing."""

    def __init__(self) -> None:
        self._states: dict[UserId, UserState] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[UserState]:
        """Find a user's state by ID."""
        return self._states.get(user_id)

    async def save(self, state: UserState) -> UserState:
        """Save a user's state (create or replace)."""
        self._states[state.id] = state
        return state

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user's state."""
        return self._states.pop(user_id, None) is not None
