"""Unit tests for ProgressionEngine."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lifequest.domain.error import BusinessRuleViolationError, NotFoundError
from lifequest.domain.repository import TaskRepository, UserStateRepository
from lifequest.domain.rules import SkillUpgradeOutcome
from lifequest.domain.service import ProgressionEngine, SyncService
from lifequest.domain.value import NotificationId, TaskType, UserId
from tests.conftest import NOW, make_task
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

YESTERDAY = NOW - timedelta(days=1)


def _titles(state):
    return [n.title for n in state.notifications]


class TestCreateUser:
    """Tests for account creation."""

    @pytest.mark.asyncio
    async def test_create_user_stores_default_state(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)

        state = await engine.create_user(name="Ada", now=NOW)

        stored = await engine.get_user(state.id)
        assert stored == state
        assert stored.name == "Ada"
        assert stored.level == 1
        assert stored.coins == 50
        assert await sync_service.pending_count(state.id) == 1

    @pytest.mark.asyncio
    async def test_create_user_with_taken_id_raises_error(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        user_id = UserId(uuid4())
        await engine.create_user(user_id=user_id, now=NOW)

        with pytest.raises(BusinessRuleViolationError):
            await engine.create_user(user_id=user_id, now=NOW)

    @pytest.mark.asyncio
    async def test_get_missing_user_raises_not_found(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)

        with pytest.raises(NotFoundError):
            await engine.get_user(UserId(uuid4()))


class TestStartSession:
    """Tests for the rollover barrier."""

    @pytest.mark.asyncio
    async def test_same_day_session_changes_nothing(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        state = await engine.create_user(now=NOW)

        result = await engine.start_session(state.id, NOW + timedelta(hours=2))

        assert not result.applied
        assert await sync_service.pending_count(state.id) == 1

    @pytest.mark.asyncio
    async def test_new_day_penalises_missed_dailies(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        task_repo = await unit_env.get(TaskRepository)
        state = await engine.create_user(now=YESTERDAY)
        dailies = [
            make_task(state.id, title=f"Daily {i}", type=TaskType.DAILY, streak=2)
            for i in range(3)
        ]
        await task_repo.save_all(dailies)

        result = await engine.start_session(state.id, NOW)

        assert result.applied
        assert result.health_penalty == 30
        stored = await engine.get_user(state.id)
        assert stored.health == 70
        assert stored.last_login == NOW
        assert "Daily Reset" in _titles(stored)
        assert all(t.streak == 0 for t in await task_repo.find_by_user(state.id))

    @pytest.mark.asyncio
    async def test_session_runs_rollover_once_per_day(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        task_repo = await unit_env.get(TaskRepository)
        state = await engine.create_user(now=YESTERDAY)
        await task_repo.save(make_task(state.id, type=TaskType.DAILY))

        await engine.start_session(state.id, NOW)
        again = await engine.start_session(state.id, NOW + timedelta(hours=1))

        assert not again.applied
        assert (await engine.get_user(state.id)).health == 90

    @pytest.mark.asyncio
    async def test_exhaustion_resets_health_and_notifies(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        user_repo = await unit_env.get(UserStateRepository)
        task_repo = await unit_env.get(TaskRepository)
        state = await engine.create_user(now=YESTERDAY)
        await user_repo.save(state.model_copy(update={"health": 5, "xp": 40}))
        await task_repo.save(make_task(state.id, type=TaskType.DAILY))

        result = await engine.start_session(state.id, NOW)

        assert result.exhausted
        stored = await engine.get_user(state.id)
        assert stored.health == stored.max_health
        assert stored.xp == 0
        assert stored.coins == 0
        assert "Exhausted!" in _titles(stored)


class TestMutations:
    @pytest.mark.asyncio
    async def test_gain_xp_announces_level_up(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        change = await engine.gain_xp(state.id, 300, NOW)

        assert change.levels_gained == [2]
        stored = await engine.get_user(state.id)
        assert stored.level == 2
        assert stored.notifications[0].title == "Level Up!"

    @pytest.mark.asyncio
    async def test_losing_xp_announces_level_down(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)
        await engine.gain_xp(state.id, 300, NOW)

        change = await engine.gain_xp(state.id, -300, NOW)

        assert change.levels_lost == [1]
        assert (await engine.get_user(state.id)).notifications[0].title == "Level Down"

    @pytest.mark.asyncio
    async def test_rejected_coin_debit_is_not_stored(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        state = await engine.create_user(now=NOW)

        result = await engine.adjust_coins(state.id, -60, NOW)

        assert not result.success
        assert (await engine.get_user(state.id)).coins == 50
        assert await sync_service.pending_count(state.id) == 1

    @pytest.mark.asyncio
    async def test_gem_credit_is_stored(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        result = await engine.adjust_gems(state.id, 10, NOW)

        assert result.success
        assert (await engine.get_user(state.id)).gems == 15

    @pytest.mark.asyncio
    async def test_upgrade_skill(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        upgrade = await engine.upgrade_skill(state.id, "Agility", "Quickness", NOW)

        assert upgrade.success
        stored = await engine.get_user(state.id)
        assert stored.skill_points == 4
        assert stored.notifications[0].title == "Stat Upgraded!"

    @pytest.mark.asyncio
    async def test_rejected_skill_upgrade_keeps_points(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        upgrade = await engine.upgrade_skill(state.id, "Agility", "Teleport", NOW)

        assert upgrade.outcome is SkillUpgradeOutcome.UNKNOWN_SKILL
        assert (await engine.get_user(state.id)).skill_points == 5


class TestNotifications:
    @pytest.mark.asyncio
    async def test_mark_all_read(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)
        await engine.gain_xp(state.id, 300, NOW)

        updated = await engine.mark_notifications_read(state.id, now=NOW)

        assert len(updated.notifications) == 2
        assert all(n.read for n in updated.notifications)

    @pytest.mark.asyncio
    async def test_delete_notification(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        updated = await engine.delete_notification(
            state.id, state.notifications[0].id, NOW
        )

        assert updated.notifications == []

    @pytest.mark.asyncio
    async def test_delete_unknown_notification_raises_not_found(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)

        with pytest.raises(NotFoundError):
            await engine.delete_notification(state.id, NotificationId(uuid4()), NOW)
