"""Cover storage infrastructure providers."""

from pathlib import Path

from dishka import Scope, provide

from surmise.adapter.storage import LocalCoverStorage
from surmise.config import UploadSettings
from surmise.domain.service import CoverStorage
from surmise.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Cover storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the uploads directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_cover_storage(self, upload_settings: UploadSettings) -> CoverStorage:
        """Provide local disk cover storage."""
        return LocalCoverStorage(
            directory=Path(upload_settings.directory),
            mount_path=upload_settings.mount_path,
            max_file_size=upload_settings.max_file_size,
        )
