"""Mock remote store provider for testing."""

from dishka import Scope, provide

from lifequest.adapter.remote import MockRemoteStore
from lifequest.domain.service import RemoteStore
from lifequest.util.di.infrastructure.remote import RemoteProvider


class MockRemoteProvider(RemoteProvider):
    """Mock remote provider using the in-process document store."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_remote_store(self) -> RemoteStore:
        """Provide mock remote store (online, accepts everything)."""
        return MockRemoteStore()
