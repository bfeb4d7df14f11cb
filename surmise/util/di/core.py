"""Configuration providers."""

from dishka import Scope, provide

from surmise.config import AuthSettings, Settings, UploadSettings
from surmise.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads Settings once per process and hands out its sections."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads
