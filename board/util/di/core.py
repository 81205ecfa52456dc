"""Configuration provider."""

from typing import Optional

from dishka import Scope, provide

from board.config import Settings
from board.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Provides application settings.

    Settings come from the environment and ``.env`` unless an instance is
    handed in (scripts and tests that need fixed values).
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings or Settings()
