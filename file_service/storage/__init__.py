"""
Storage abstraction layer for file operations.

This package provides a flat, name-addressed file namespace with a local
filesystem implementation.
"""

from file_service.storage.base import StorageBackend
from file_service.storage.content_types import resolve_content_type
from file_service.storage.exceptions import (
    FileSizeExceededError,
    InvalidInputError,
    StorageError,
    StorageUnavailableError,
)
from file_service.storage.local import LocalStorageBackend
from file_service.storage.models import FileContent, StoredFile, StoredFileInfo

__all__ = [
    "StorageBackend",
    "LocalStorageBackend",
    "FileContent",
    "StoredFile",
    "StoredFileInfo",
    "resolve_content_type",
    "StorageError",
    "InvalidInputError",
    "FileSizeExceededError",
    "StorageUnavailableError",
]
