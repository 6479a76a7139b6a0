"""Unit tests for boss use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from lifequest.application.usecase.boss import (
    AssignBossRequest,
    AssignBossUseCase,
    GetBossRequest,
    GetBossUseCase,
    ResetBossRequest,
    ResetBossUseCase,
)
from lifequest.domain.error import NotFoundError
from lifequest.domain.repository import BossRepository
from lifequest.domain.service import ProgressionEngine
from lifequest.domain.value import BossRewards
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestBossUseCases:
    @pytest.mark.asyncio
    async def test_assign_then_get(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        assign = await unit_env.get(AssignBossUseCase)
        get_boss = await unit_env.get(GetBossUseCase)
        user = await engine.create_user()

        assigned = await assign.execute(
            AssignBossRequest(
                user_id=user.id,
                name="Sloth",
                title="The Couch King",
                max_hp=250,
                rewards=BossRewards(xp=50, coins=20, gems=1),
            )
        )
        response = await get_boss.execute(GetBossRequest(user_id=user.id))

        assert response.boss == assigned.boss
        assert not response.defeated_this_week

    @pytest.mark.asyncio
    async def test_get_without_boss_raises_not_found(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        get_boss = await unit_env.get(GetBossUseCase)
        user = await engine.create_user()

        with pytest.raises(NotFoundError):
            await get_boss.execute(GetBossRequest(user_id=user.id))

    @pytest.mark.asyncio
    async def test_reset_restores_hp(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        assign = await unit_env.get(AssignBossUseCase)
        reset = await unit_env.get(ResetBossUseCase)
        boss_repo = await unit_env.get(BossRepository)
        user = await engine.create_user()
        boss = (
            await assign.execute(AssignBossRequest(user_id=user.id, name="Imp", max_hp=80))
        ).boss
        await boss_repo.save(boss.model_copy(update={"current_hp": 5}))

        response = await reset.execute(ResetBossRequest(user_id=user.id))

        assert response.boss.current_hp == 80
        assert not response.defeated_this_week

    def test_boss_needs_positive_hp(self):
        with pytest.raises(ValidationError):
            AssignBossRequest(user_id=uuid4(), name="Nobody", max_hp=0)
