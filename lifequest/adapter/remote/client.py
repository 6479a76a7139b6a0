"""Remote document store clients.

Operations are sent one at a time; the operation id travels as an
idempotency key so the store can acknowledge duplicates.
"""

from typing import Optional

import httpx
import logfire

from lifequest.adapter.error import RemoteStoreError
from lifequest.domain.model import PendingOperation
from lifequest.domain.service.sync_service import RemoteStore
from lifequest.domain.value import OperationId, OperationKind


class HttpRemoteStore(RemoteStore):
    """Remote store reached over HTTP.

    PUT and DELETE go to ``{base_url}/{collection}/{key}``.
    """

    def __init__(
        self,
        base_url: str,
        enabled: bool = True,
        timeout_seconds: float = 10.0,
        api_key: Optional[str] = None,
    ) -> None:
        """Initialize HTTP remote store.

        Args:
            base_url: Store root URL
            enabled: When False the store reports itself offline
            timeout_seconds: Per-request timeout
            api_key: Bearer token sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self.enabled = enabled
        self.timeout_seconds = timeout_seconds
        self.api_key = api_key

    def _headers(self, operation: PendingOperation) -> dict[str, str]:
        headers = {"Idempotency-Key": str(operation.id)}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def is_online(self) -> bool:
        """Whether replay should be attempted.

        Returns:
            False when disabled or when the health endpoint is unreachable
        """
        if not self.enabled:
            return False
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.base_url}/health", timeout=self.timeout_seconds
                )
                return response.status_code < 500
        except httpx.HTTPError as e:
            logfire.warn("Remote store unreachable", error=str(e))
            return False

    async def apply(self, operation: PendingOperation) -> None:
        """Send one operation.

        Raises:
            RemoteStoreError: On transport errors and non-2xx responses
        """
        url = f"{self.base_url}/{operation.collection}/{operation.key}"
        try:
            async with httpx.AsyncClient() as client:
                if operation.kind is OperationKind.PUT:
                    response = await client.put(
                        url,
                        json=operation.payload,
                        headers=self._headers(operation),
                        timeout=self.timeout_seconds,
                    )
                else:
                    response = await client.delete(
                        url,
                        headers=self._headers(operation),
                        timeout=self.timeout_seconds,
                    )
        except httpx.HTTPError as e:
            logfire.error(
                "Remote store HTTP error", operation_id=str(operation.id), error=str(e)
            )
            raise RemoteStoreError(f"HTTP error applying operation: {e}")

        # 404 on delete means the document is already gone
        if response.status_code == 404 and operation.kind is OperationKind.DELETE:
            return
        if not response.is_success:
            logfire.error(
                "Remote store rejected operation",
                operation_id=str(operation.id),
                status_code=response.status_code,
                error=response.text,
            )
            raise RemoteStoreError(
                f"Remote store returned {response.status_code}"
            )


class MockRemoteStore(RemoteStore):
    """In-process remote store for testing.

    Keeps documents per collection and the set of applied operation ids.
    ``fail_on`` makes the store reject specific operations.
    """

    def __init__(self) -> None:
        self.online = True
        self.documents: dict[str, dict[str, dict]] = {}
        self.applied_ids: set[OperationId] = set()
        self.apply_count = 0
        self.fail_on: set[OperationId] = set()

    async def is_online(self) -> bool:
        return self.online

    async def apply(self, operation: PendingOperation) -> None:
        """Apply an operation unless it already was or is set up to fail."""
        if operation.id in self.fail_on:
            raise RemoteStoreError(f"Rejected operation {operation.id}")
        if operation.id in self.applied_ids:
            return

        collection = self.documents.setdefault(operation.collection, {})
        if operation.kind is OperationKind.PUT:
            collection[operation.key] = dict(operation.payload)
        else:
            collection.pop(operation.key, None)
        self.applied_ids.add(operation.id)
        self.apply_count += 1
