"""Core DI providers (non-mockable)."""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dishka import Scope, provide

from lifequest.config import ProgressionSettings, Settings
from lifequest.util.di.base import ProviderBase
from lifequest.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Config provider. Settings are loaded from the environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_progression_settings(self, settings: Settings) -> ProgressionSettings:
        """Provide game balance settings.

        Raises:
            ConfigurationError: If the configured timezone is unknown
        """
        try:
            ZoneInfo(settings.progression.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigurationError(
                f"Unknown timezone: {settings.progression.timezone}"
            ) from e
        return settings.progression
