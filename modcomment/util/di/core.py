"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from modcomment.config import Settings
from modcomment.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file once,
    then shared by every component.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
