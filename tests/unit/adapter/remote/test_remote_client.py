"""Unit tests for the remote document store clients."""

from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import httpx
import pytest

from lifequest.adapter.error import RemoteStoreError
from lifequest.adapter.remote import HttpRemoteStore, MockRemoteStore
from lifequest.domain.error import SyncError
from lifequest.domain.model import PendingOperation
from lifequest.domain.value import OperationId, OperationKind, UserId
from tests.conftest import NOW


def make_operation(kind: OperationKind = OperationKind.PUT, **overrides) -> PendingOperation:
    fields = dict(
        id=OperationId(uuid4()),
        user_id=UserId(uuid4()),
        kind=kind,
        collection="tasks",
        key="task-1",
        payload={"title": "Read"} if kind is OperationKind.PUT else {},
        created_at=NOW,
    )
    fields.update(overrides)
    return PendingOperation(**fields)


def _response(status_code: int) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = ""
    return response


class TestHttpRemoteStore:
    """Tests for HttpRemoteStore."""

    @pytest.mark.asyncio
    async def test_disabled_store_is_offline(self):
        store = HttpRemoteStore("http://store.local", enabled=False)

        with patch("httpx.AsyncClient") as mock_client:
            assert not await store.is_online()
            mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreachable_store_is_offline(self):
        store = HttpRemoteStore("http://store.local")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            assert not await store.is_online()

    @pytest.mark.asyncio
    async def test_put_sends_payload_with_idempotency_key(self):
        store = HttpRemoteStore("http://store.local/", api_key="secret")
        operation = make_operation()

        with patch("httpx.AsyncClient") as mock_client:
            put = AsyncMock(return_value=_response(200))
            mock_client.return_value.__aenter__.return_value.put = put

            await store.apply(operation)

            put.assert_called_once_with(
                "http://store.local/tasks/task-1",
                json={"title": "Read"},
                headers={
                    "Idempotency-Key": str(operation.id),
                    "Authorization": "Bearer secret",
                },
                timeout=10.0,
            )

    @pytest.mark.asyncio
    async def test_delete_of_missing_document_succeeds(self):
        store = HttpRemoteStore("http://store.local")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.delete = AsyncMock(
                return_value=_response(404)
            )

            await store.apply(make_operation(OperationKind.DELETE))

    @pytest.mark.asyncio
    async def test_rejected_put_raises_sync_error(self):
        store = HttpRemoteStore("http://store.local")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.put = AsyncMock(
                return_value=_response(409)
            )

            with pytest.raises(SyncError):
                await store.apply(make_operation())

    @pytest.mark.asyncio
    async def test_transport_error_raises_remote_store_error(self):
        store = HttpRemoteStore("http://store.local")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.put = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(RemoteStoreError):
                await store.apply(make_operation())


class TestMockRemoteStore:
    @pytest.mark.asyncio
    async def test_put_then_delete(self):
        store = MockRemoteStore()

        await store.apply(make_operation())
        await store.apply(make_operation(OperationKind.DELETE))

        assert store.documents["tasks"] == {}
        assert store.apply_count == 2

    @pytest.mark.asyncio
    async def test_duplicate_operation_is_applied_once(self):
        store = MockRemoteStore()
        operation = make_operation()

        await store.apply(operation)
        await store.apply(operation)

        assert store.apply_count == 1
        assert store.documents["tasks"]["task-1"] == {"title": "Read"}

    @pytest.mark.asyncio
    async def test_fail_on_rejects_operation(self):
        store = MockRemoteStore()
        operation = make_operation()
        store.fail_on = {operation.id}

        with pytest.raises(RemoteStoreError):
            await store.apply(operation)
        assert store.documents == {}
