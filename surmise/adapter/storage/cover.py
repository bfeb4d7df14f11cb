"""Cover image storage.

Uploads land in the uploads directory under a random hex name, and are
renamed to carry their original extension on commit. The public path is
the mount path plus the final name ("uploads/9f86d08...c1.png"), which the
static file route serves.
"""

import secrets
from pathlib import Path

import logfire

from surmise.adapter.error import StorageError, UploadTooLargeError
from surmise.domain.service.storage import CoverStorage, StagedCover


def _new_key() -> str:
    return secrets.token_hex(16)


class LocalCoverStorage(CoverStorage):
    """Cover storage on the local file system."""

    def __init__(self, directory: Path, mount_path: str, max_file_size: int) -> None:
        """Initialize local cover storage.

        Args:
            directory: Directory holding uploaded covers
            mount_path: URL prefix the directory is served under
            max_file_size: Upload size limit in bytes
        """
        self.directory = directory
        self.prefix = mount_path.strip("/")
        self.max_file_size = max_file_size

    async def stage(self, original_name: str, data: bytes) -> StagedCover:
        """Write the upload under a temporary name."""
        if len(data) > self.max_file_size:
            raise UploadTooLargeError(len(data), self.max_file_size)

        self.directory.mkdir(parents=True, exist_ok=True)
        staged = StagedCover(
            key=_new_key(), original_name=original_name, size=len(data)
        )
        (self.directory / staged.key).write_bytes(data)

        logfire.debug("Cover staged", key=staged.key, size=staged.size)
        return staged

    async def commit(self, staged: StagedCover) -> str:
        """Rename the staged file to its final name."""
        if staged.committed_path is not None:
            return staged.committed_path

        source = self.directory / staged.key
        try:
            source.rename(self.directory / staged.final_name)
        except OSError as e:
            raise StorageError(f"Could not commit cover {staged.key}: {e}") from e

        staged.committed_path = f"{self.prefix}/{staged.final_name}"
        logfire.info("Cover committed", path=staged.committed_path)
        return staged.committed_path

    async def discard(self, staged: StagedCover) -> None:
        """Delete the staged file unless it was committed."""
        if staged.committed_path is not None:
            return
        (self.directory / staged.key).unlink(missing_ok=True)
        logfire.debug("Cover discarded", key=staged.key)

    async def remove(self, path: str) -> None:
        """Delete a committed cover."""
        name = path.rsplit("/", 1)[-1]
        (self.directory / name).unlink(missing_ok=True)
        logfire.info("Cover removed", path=path)


class InMemoryCoverStorage(CoverStorage):
    """In-memory cover storage for testing."""

    def __init__(
        self, mount_path: str = "/uploads", max_file_size: int = 5 * 1024 * 1024
    ) -> None:
        self.prefix = mount_path.strip("/")
        self.max_file_size = max_file_size
        self.staged: dict[str, bytes] = {}
        self.files: dict[str, bytes] = {}

    async def stage(self, original_name: str, data: bytes) -> StagedCover:
        """Keep the upload under a temporary key."""
        if len(data) > self.max_file_size:
            raise UploadTooLargeError(len(data), self.max_file_size)

        staged = StagedCover(
            key=_new_key(), original_name=original_name, size=len(data)
        )
        self.staged[staged.key] = data
        return staged

    async def commit(self, staged: StagedCover) -> str:
        """Move the upload to the committed files."""
        if staged.committed_path is not None:
            return staged.committed_path

        data = self.staged.pop(staged.key)
        staged.committed_path = f"{self.prefix}/{staged.final_name}"
        self.files[staged.committed_path] = data
        return staged.committed_path

    async def discard(self, staged: StagedCover) -> None:
        """Drop the staged upload unless it was committed."""
        if staged.committed_path is None:
            self.staged.pop(staged.key, None)

    async def remove(self, path: str) -> None:
        """Drop a committed file."""
        self.files.pop(path, None)
