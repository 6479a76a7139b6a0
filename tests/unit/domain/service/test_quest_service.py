"""Unit tests for QuestService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lifequest.domain.error import NotFoundError, NotOwnerError
from lifequest.domain.repository import TaskRepository
from lifequest.domain.service import BossService, ProgressionEngine, QuestService
from lifequest.domain.value import (
    BossRewards,
    Difficulty,
    HitKind,
    TaskCategory,
    TaskId,
    TaskType,
    UserId,
)
from tests.conftest import NOW
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


async def _setup(unit_env, now=NOW):
    engine = await unit_env.get(ProgressionEngine)
    quest_service = await unit_env.get(QuestService)
    state = await engine.create_user(now=now)
    return engine, quest_service, state


class TestCreateTask:
    @pytest.mark.asyncio
    async def test_create_and_list(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)

        first = await quest_service.create_task(
            state.id, "Stretch", TaskCategory.HEALTH, now=NOW
        )
        second = await quest_service.create_task(
            state.id, "Budget", TaskCategory.FINANCE, now=NOW + timedelta(minutes=1)
        )

        tasks = await quest_service.list_tasks(state.id)
        assert [t.id for t in tasks] == [second.id, first.id]
        assert not first.completed

    @pytest.mark.asyncio
    async def test_create_for_missing_user_raises_not_found(self, unit_env):
        quest_service = await unit_env.get(QuestService)

        with pytest.raises(NotFoundError):
            await quest_service.create_task(
                UserId(uuid4()), "Read", TaskCategory.EDUCATION, now=NOW
            )


class TestSetCompletion:
    """Tests for checking and unchecking quests."""

    @pytest.mark.asyncio
    async def test_completion_grants_rewards(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, xp=300, coins=20, now=NOW
        )

        outcome = await quest_service.set_completion(state.id, task.id, True, NOW)

        assert outcome.changed
        assert outcome.boss_hit is None
        assert outcome.levels_gained == [2]
        stored = await engine.get_user(state.id)
        assert stored.level == 2
        assert stored.coins == 70
        assert stored.tasks_completed == 1
        titles = [n.title for n in stored.notifications]
        assert "Quest Complete!" in titles
        assert "Level Up!" in titles

    @pytest.mark.asyncio
    async def test_repeating_current_state_is_a_no_op(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, xp=10, now=NOW
        )
        await quest_service.set_completion(state.id, task.id, True, NOW)

        outcome = await quest_service.set_completion(state.id, task.id, True, NOW)

        assert not outcome.changed
        assert (await engine.get_user(state.id)).xp == 10

    @pytest.mark.asyncio
    async def test_uncheck_takes_rewards_back(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, xp=10, coins=5, now=NOW
        )
        await quest_service.set_completion(state.id, task.id, True, NOW)

        outcome = await quest_service.set_completion(state.id, task.id, False, NOW)

        assert outcome.changed
        assert not outcome.task.completed
        stored = await engine.get_user(state.id)
        assert (stored.xp, stored.coins) == (0, 50)
        assert stored.notifications[0].title == "Quest Undone"

    @pytest.mark.asyncio
    async def test_uncheck_without_enough_coins_warns(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        task = await quest_service.create_task(
            state.id, "Sell", TaskCategory.FINANCE, coins=20, now=NOW
        )
        await quest_service.set_completion(state.id, task.id, True, NOW)
        await engine.adjust_coins(state.id, -70, NOW)

        outcome = await quest_service.set_completion(state.id, task.id, False, NOW)

        assert not outcome.coins_applied
        stored = await engine.get_user(state.id)
        assert stored.coins == 0
        assert "Not enough coins!" in [n.title for n in stored.notifications]

    @pytest.mark.asyncio
    async def test_completion_damages_boss(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        boss_service = await unit_env.get(BossService)
        await boss_service.assign_boss(
            state.id,
            "Dragon",
            500,
            resistances={TaskCategory.EDUCATION: 0.5},
            now=NOW,
        )
        task = await quest_service.create_task(
            state.id,
            "Read",
            TaskCategory.EDUCATION,
            difficulty=Difficulty.EASY,
            now=NOW,
        )

        outcome = await quest_service.set_completion(state.id, task.id, True, NOW)

        assert outcome.boss_hit.damage == 50
        assert outcome.boss_hit.hit_kind is HitKind.CRITICAL
        boss = await boss_service.get_boss(state.id)
        assert boss.current_hp == 450
        assert "Critical Hit!" in [
            n.title for n in (await engine.get_user(state.id)).notifications
        ]

    @pytest.mark.asyncio
    async def test_uncheck_does_not_heal_boss(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        boss_service = await unit_env.get(BossService)
        await boss_service.assign_boss(state.id, "Dragon", 500, now=NOW)
        task = await quest_service.create_task(
            state.id, "Run", TaskCategory.HEALTH, difficulty=Difficulty.HARD, now=NOW
        )
        await quest_service.set_completion(state.id, task.id, True, NOW)

        await quest_service.set_completion(state.id, task.id, False, NOW)

        assert (await boss_service.get_boss(state.id)).current_hp == 400

    @pytest.mark.asyncio
    async def test_defeating_boss_grants_loot_once(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        boss_service = await unit_env.get(BossService)
        await boss_service.assign_boss(
            state.id,
            "Imp",
            30,
            rewards=BossRewards(xp=100, coins=50, gems=5),
            now=NOW,
        )
        tasks = [
            await quest_service.create_task(
                state.id,
                f"Quest {i}",
                TaskCategory.HOME,
                difficulty=Difficulty.MEDIUM,
                xp=10,
                coins=5,
                now=NOW,
            )
            for i in range(2)
        ]

        first = await quest_service.set_completion(state.id, tasks[0].id, True, NOW)
        second = await quest_service.set_completion(state.id, tasks[1].id, True, NOW)

        assert first.boss_hit.defeated
        assert second.boss_hit.hit_kind is HitKind.NO_EFFECT
        stored = await engine.get_user(state.id)
        assert stored.xp == 10 + 100 + 10
        assert stored.coins == 50 + 5 + 50 + 5
        assert stored.gems == 10
        titles = [n.title for n in stored.notifications]
        assert titles.count("Boss Defeated!") == 1

    @pytest.mark.asyncio
    async def test_rollover_runs_before_completion(self, unit_env):
        yesterday = NOW - timedelta(days=1)
        engine, quest_service, state = await _setup(unit_env, now=yesterday)
        daily = await quest_service.create_task(
            state.id, "Meditate", TaskCategory.MENTAL_WELLNESS,
            type=TaskType.DAILY, now=yesterday,
        )
        quest = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, xp=10, now=yesterday
        )

        outcome = await quest_service.set_completion(state.id, quest.id, True, NOW)

        assert outcome.state.health == 90
        assert outcome.state.last_login == NOW
        task_repo = await unit_env.get(TaskRepository)
        assert (await task_repo.find_by_id(daily.id)).streak == 0

    @pytest.mark.asyncio
    async def test_other_users_quest_raises_not_owner(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        intruder = await engine.create_user(now=NOW)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, now=NOW
        )

        with pytest.raises(NotOwnerError):
            await quest_service.set_completion(intruder.id, task.id, True, NOW)

    @pytest.mark.asyncio
    async def test_missing_quest_raises_not_found(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await quest_service.set_completion(state.id, TaskId(uuid4()), True, NOW)


class TestDeleteTask:
    @pytest.mark.asyncio
    async def test_delete_keeps_earned_rewards(self, unit_env):
        engine, quest_service, state = await _setup(unit_env)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, xp=10, now=NOW
        )
        await quest_service.set_completion(state.id, task.id, True, NOW)

        await quest_service.delete_task(state.id, task.id, NOW)

        assert await quest_service.list_tasks(state.id) == []
        assert (await engine.get_user(state.id)).xp == 10
