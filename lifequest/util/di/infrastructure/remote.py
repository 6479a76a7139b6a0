"""Remote document store providers."""

from dishka import Scope, provide

from lifequest.adapter.remote import HttpRemoteStore
from lifequest.config import Settings
from lifequest.domain.service import RemoteStore
from lifequest.util.di.base import ProviderBase
from lifequest.util.error import ConfigurationError
from lifequest.util.observability import instrument_httpx


class RemoteProvider(ProviderBase):
    """Remote store component base."""

    __mock_component__ = "remote"


class ProdRemoteProvider(RemoteProvider):
    """Production remote store provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_remote_store(self, settings: Settings) -> RemoteStore:
        """Provide the HTTP remote store.

        A disabled store reports itself offline, so operations only queue.

        Raises:
            ConfigurationError: If the store is enabled without a base URL
        """
        if settings.remote.enabled:
            if not settings.remote.base_url:
                raise ConfigurationError("REMOTE__BASE_URL must be set when enabled")
            instrument_httpx()

        return HttpRemoteStore(
            base_url=settings.remote.base_url,
            enabled=settings.remote.enabled,
            timeout_seconds=settings.remote.timeout_seconds,
            api_key=settings.remote.api_key,
        )
