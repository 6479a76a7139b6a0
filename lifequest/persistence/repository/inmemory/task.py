"""In-memory task repository for testing."""

from typing import List, Optional, Sequence

from lifequest.domain.model import Task
from lifequest.domain.repository import TaskRepository
from lifequest.domain.value import TaskId, UserId


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository for testing."""

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        return self._tasks.get(task_id)

    async def find_by_user(self, user_id: UserId) -> List[Task]:
        """Find all tasks owned by a user, newest first."""
        tasks = [t for t in self._tasks.values() if t.user_id == user_id]
        tasks.sort(key=lambda t: t.created_at, reverse=True)
        return tasks

    async def save(self, task: Task) -> Task:
        """Save a task (create or replace)."""
        self._tasks[task.id] = task
        return task

    async def save_all(self, tasks: Sequence[Task]) -> List[Task]:
        """Save several tasks."""
        return [await self.save(task) for task in tasks]

    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task."""
        return self._tasks.pop(task_id, None) is not None
