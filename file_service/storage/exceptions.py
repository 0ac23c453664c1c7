"""
Storage-specific exceptions.

Not-found is a normal outcome of the storage backend and has no exception:
reads return ``None`` and deletes return ``False``.
"""


class StorageError(Exception):
    """Base exception for storage operations."""

    pass


class InvalidInputError(StorageError):
    """Raised when an upload is empty or its filename cannot form a storage key."""

    pass


class FileSizeExceededError(StorageError):
    """Raised when uploaded file exceeds maximum size limit."""

    def __init__(self, file_size: int, max_size: int):
        self.file_size = file_size
        self.max_size = max_size
        super().__init__(
            f"File size ({file_size} bytes) exceeds maximum allowed size ({max_size} bytes)"
        )


class StorageUnavailableError(StorageError):
    """Raised when the backing store fails an I/O operation."""

    def __init__(self, operation: str, storage_key: str | None = None):
        self.operation = operation
        self.storage_key = storage_key
        target = f" for {storage_key}" if storage_key else ""
        super().__init__(f"Storage unavailable: failed to {operation}{target}")
