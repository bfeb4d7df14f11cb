"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class StorageError(AdapterError):
    """File storage error."""

    pass


class UploadTooLargeError(StorageError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Upload of {size} bytes exceeds the {limit} byte limit")
