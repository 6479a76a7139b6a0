"""Unit tests for SetTaskCompletionUseCase."""

from uuid import uuid4

import pytest

from lifequest.application.usecase.boss import AssignBossRequest, AssignBossUseCase
from lifequest.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    SetTaskCompletionRequest,
    SetTaskCompletionUseCase,
)
from lifequest.domain.error import NotFoundError
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import Difficulty, HitKind, TaskCategory
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSetTaskCompletionUseCase:
    """Tests for SetTaskCompletionUseCase."""

    @pytest.mark.asyncio
    async def test_completion_reports_boss_hit(self, unit_env):
        """Completing a quest should report rewards and the boss reaction."""
        # Arrange
        engine = await unit_env.get(ProgressionEngine)
        create_task = await unit_env.get(CreateTaskUseCase)
        assign_boss = await unit_env.get(AssignBossUseCase)
        use_case = await unit_env.get(SetTaskCompletionUseCase)

        user = await engine.create_user(name="Ada")
        await assign_boss.execute(
            AssignBossRequest(
                user_id=user.id,
                name="Procrastination Golem",
                max_hp=500,
                resistances={TaskCategory.HEALTH: 2.0},
            )
        )
        task = (
            await create_task.execute(
                CreateTaskRequest(
                    user_id=user.id,
                    title="Morning run",
                    category=TaskCategory.HEALTH,
                    difficulty=Difficulty.HARD,
                    xp=30,
                    coins=10,
                )
            )
        ).task

        # Act
        response = await use_case.execute(
            SetTaskCompletionRequest(user_id=user.id, task_id=task.id, completed=True)
        )

        # Assert
        assert response.changed
        assert response.task.completed
        assert response.user.xp == 30
        assert response.user.coins == 60
        assert response.boss_hit.hit_kind is HitKind.RESISTED
        assert response.boss_hit.damage == 50
        assert response.boss_hit.boss.current_hp == 450
        assert not response.boss_hit.defeated

    @pytest.mark.asyncio
    async def test_completion_without_boss_has_no_hit(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        create_task = await unit_env.get(CreateTaskUseCase)
        use_case = await unit_env.get(SetTaskCompletionUseCase)
        user = await engine.create_user()
        task = (
            await create_task.execute(
                CreateTaskRequest(
                    user_id=user.id, title="Tidy desk", category=TaskCategory.HOME
                )
            )
        ).task

        response = await use_case.execute(
            SetTaskCompletionRequest(user_id=user.id, task_id=task.id, completed=True)
        )

        assert response.boss_hit is None
        assert response.levels_gained == []

    @pytest.mark.asyncio
    async def test_unknown_task_raises_not_found(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        use_case = await unit_env.get(SetTaskCompletionUseCase)
        user = await engine.create_user()

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SetTaskCompletionRequest(
                    user_id=user.id, task_id=uuid4(), completed=True
                )
            )
