"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lifequest.domain.model.task import Task
from lifequest.domain.value import TaskId, UserId


class TaskRepository(ABC):
    """Repository for Task entities, keyed by id with a user foreign key."""

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID.

        Args:
            task_id: The task's unique identifier

        Returns:
            The task if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Task]:
        """Find all tasks owned by a user, newest first.

        Args:
            user_id: The owner's ID

        Returns:
            List of tasks
        """
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save a task (create or replace).

        Args:
            task: The task to save

        Returns:
            The saved task
        """
        pass

    @abstractmethod
    async def save_all(self, tasks: Sequence[Task]) -> List[Task]:
        """Save several tasks at once (used by the daily rollover).

        Args:
            tasks: Tasks to save

        Returns:
            The saved tasks
        """
        pass

    @abstractmethod
    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task.

        Args:
            task_id: The task ID to delete

        Returns:
            True if a task was deleted, False if none existed
        """
        pass
