"""Unit tests for SyncService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from lifequest.domain.repository import PendingOperationRepository
from lifequest.domain.service import (
    ProgressionEngine,
    QuestService,
    RemoteStore,
    SyncService,
)
from lifequest.domain.value import OperationId, OperationKind, TaskCategory
from tests.conftest import NOW
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRecord:
    @pytest.mark.asyncio
    async def test_record_with_known_id_is_idempotent(self, unit_env):
        sync_service = await unit_env.get(SyncService)
        engine = await unit_env.get(ProgressionEngine)
        state = await engine.create_user(now=NOW)
        operation_id = OperationId(uuid4())

        first = await sync_service.record(
            state.id, OperationKind.PUT, "users", str(state.id), {"a": 1}, NOW,
            operation_id=operation_id,
        )
        second = await sync_service.record(
            state.id, OperationKind.PUT, "users", str(state.id), {"a": 2}, NOW,
            operation_id=operation_id,
        )

        assert second == first
        assert await sync_service.pending_count(state.id) == 2  # create + one

    @pytest.mark.asyncio
    async def test_mutations_are_queued_in_order(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        quest_service = await unit_env.get(QuestService)
        op_repo = await unit_env.get(PendingOperationRepository)
        state = await engine.create_user(now=NOW)
        task = await quest_service.create_task(
            state.id, "Read", TaskCategory.EDUCATION, now=NOW
        )
        await quest_service.delete_task(state.id, task.id, NOW)

        pending = await op_repo.find_pending(state.id)

        assert [(op.collection, op.kind) for op in pending] == [
            ("users", OperationKind.PUT),
            ("tasks", OperationKind.PUT),
            ("tasks", OperationKind.DELETE),
        ]
        assert pending[1].payload["title"] == "Read"


class TestReplay:
    """Tests for replaying the log against the remote store."""

    @pytest.mark.asyncio
    async def test_applied_operations_are_purged_after_retention(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        op_repo = await unit_env.get(PendingOperationRepository)
        state = await engine.create_user(now=NOW)
        first = await sync_service.replay(now=NOW)
        week_later = NOW + timedelta(days=8)
        await engine.gain_xp(state.id, 10, week_later)

        second = await sync_service.replay(now=week_later)

        assert first.purged == 0
        assert second.purged == 1
        assert await op_repo.find_by_id(first.applied[0].id) is None
        # Freshly applied operations stay in the log
        assert await op_repo.find_by_id(second.applied[0].id) is not None

    @pytest.mark.asyncio
    async def test_replay_applies_everything(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        remote = await unit_env.get(RemoteStore)
        state = await engine.create_user(name="Ada", now=NOW)
        await engine.gain_xp(state.id, 10, NOW)

        result = await sync_service.replay(now=NOW)

        assert result.online
        assert len(result.applied) == 2
        assert all(op.applied_at == NOW and op.attempts == 1 for op in result.applied)
        assert result.remaining == 0
        assert remote.documents["users"][str(state.id)]["xp"] == 10

    @pytest.mark.asyncio
    async def test_offline_store_keeps_queue(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        remote = await unit_env.get(RemoteStore)
        remote.online = False
        await engine.create_user(now=NOW)

        result = await sync_service.replay(now=NOW)

        assert not result.online
        assert result.remaining == 1
        assert remote.apply_count == 0

    @pytest.mark.asyncio
    async def test_failure_stops_replay_and_stays_at_head(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        quest_service = await unit_env.get(QuestService)
        sync_service = await unit_env.get(SyncService)
        op_repo = await unit_env.get(PendingOperationRepository)
        remote = await unit_env.get(RemoteStore)
        state = await engine.create_user(now=NOW)
        await quest_service.create_task(state.id, "Read", TaskCategory.EDUCATION, now=NOW)
        head = (await op_repo.find_pending())[0]
        remote.fail_on = {head.id}

        failed_run = await sync_service.replay(now=NOW)

        assert failed_run.applied == []
        assert failed_run.failed.id == head.id
        assert failed_run.failed.attempts == 1
        assert failed_run.failed.last_error
        assert failed_run.remaining == 2
        assert remote.apply_count == 0

        remote.fail_on = set()
        retry = await sync_service.replay(now=NOW)

        assert [op.id for op in retry.applied][0] == head.id
        assert retry.applied[0].attempts == 2
        assert retry.remaining == 0

    @pytest.mark.asyncio
    async def test_replaying_an_applied_id_is_acknowledged_once(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        op_repo = await unit_env.get(PendingOperationRepository)
        remote = await unit_env.get(RemoteStore)
        await engine.create_user(now=NOW)
        operation = (await op_repo.find_pending())[0]
        # Delivered earlier, but the acknowledgement was lost
        await remote.apply(operation)

        result = await sync_service.replay(now=NOW)

        assert [op.id for op in result.applied] == [operation.id]
        assert remote.apply_count == 1

    @pytest.mark.asyncio
    async def test_replay_respects_limit(self, unit_env):
        engine = await unit_env.get(ProgressionEngine)
        sync_service = await unit_env.get(SyncService)
        for _ in range(3):
            await engine.create_user(now=NOW)

        result = await sync_service.replay(limit=2, now=NOW)

        assert len(result.applied) == 2
        assert result.remaining == 1
