"""Cover storage domain interface.

Covers are stored in two steps so that a rejected request never leaves a
file behind: the upload is first staged under a temporary name, then either
committed (renamed to a final name that keeps the original extension) once
the request is known to succeed, or discarded.
"""

from dataclasses import dataclass
from pathlib import Path

from werkzeug.utils import secure_filename


@dataclass
class StagedCover:
    """An uploaded cover waiting to be committed or discarded."""

    key: str  # Temporary name in storage
    original_name: str  # Client-side filename, source of the extension
    size: int
    committed_path: str | None = None

    @property
    def extension(self) -> str:
        """Lower-cased extension of the sanitized filename, without the dot.

        Characters that are unsafe in a path or a URL are dropped first, so
        "photo.png?v=1" yields "pngv1" and "photo.jp/g" yields "jp_g".
        """
        return Path(secure_filename(self.original_name)).suffix.lower().lstrip(".")

    @property
    def final_name(self) -> str:
        """Name the cover gets once committed."""
        return f"{self.key}.{self.extension}" if self.extension else self.key


class CoverStorage:
    """Generic cover storage interface."""

    async def stage(self, original_name: str, data: bytes) -> StagedCover:
        """Store an upload under a temporary name.

        Args:
            original_name: Client-side filename
            data: File content

        Returns:
            Handle to the staged upload

        Raises:
            UploadTooLargeError: If the upload exceeds the size limit
        """
        raise NotImplementedError

    async def commit(self, staged: StagedCover) -> str:
        """Give a staged upload its final name.

        Args:
            staged: Staged upload

        Returns:
            Public path of the cover, e.g. "uploads/<name>.png"
        """
        raise NotImplementedError

    async def discard(self, staged: StagedCover) -> None:
        """Drop a staged upload. No-op once committed.

        Args:
            staged: Staged upload
        """
        raise NotImplementedError

    async def remove(self, path: str) -> None:
        """Remove a committed cover by its public path.

        Args:
            path: Public path returned by commit()
        """
        raise NotImplementedError
