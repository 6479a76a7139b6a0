"""PostgreSQL implementation of Task repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lifequest.domain.model import Task
from lifequest.domain.repository import TaskRepository
from lifequest.domain.value import TaskId, UserId
from lifequest.persistence.mappers import row_to_task, task_to_dict
from lifequest.persistence.tables import tasks_table


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        stmt = select(tasks_table).where(tasks_table.c.id == task_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_task(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> List[Task]:
        """Find all tasks owned by a user, newest first."""
        stmt = (
            select(tasks_table)
            .where(tasks_table.c.user_id == user_id)
            .order_by(tasks_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_task(dict(row)) for row in result.mappings().all()]

    async def save(self, task: Task) -> Task:
        """Save a task (create or replace)."""
        task_dict = task_to_dict(task)

        existing = await self.session.execute(
            select(tasks_table.c.id).where(tasks_table.c.id == task.id)
        )
        if existing.first():
            stmt = (
                update(tasks_table)
                .where(tasks_table.c.id == task.id)
                .values(**task_dict)
            )
        else:
            stmt = insert(tasks_table).values(**task_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return task

    async def save_all(self, tasks: Sequence[Task]) -> List[Task]:
        """Save several tasks in the current transaction."""
        return [await self.save(task) for task in tasks]

    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task."""
        stmt = delete(tasks_table).where(tasks_table.c.id == task_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
