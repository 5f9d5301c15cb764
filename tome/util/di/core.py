"""Configuration provider."""

from dishka import Scope, provide

from tome.config import Settings
from tome.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads Settings once per container from the environment and ``.env``."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()
