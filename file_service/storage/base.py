"""
Abstract base class for storage backends.

This module defines the interface that all storage backends must implement:
a flat namespace of immutable files addressed by storage key.
"""
from abc import ABC, abstractmethod
from typing import AsyncIterator

from file_service.storage.models import FileContent, StoredFile, StoredFileInfo


class StorageBackend(ABC):
    """
    Abstract base class for storage backends.

    Every operation is a single request/response against the shared
    namespace; implementations must stay correct under concurrent calls
    without callers holding any lock.
    """

    @abstractmethod
    async def save_file(
        self,
        original_name: str | None,
        file_stream: AsyncIterator[bytes],
        declared_length: int | None = None,
    ) -> StoredFile:
        """
        Store an uploaded file under a freshly generated storage key.

        The file must not become visible to readers or listings until it
        has been written completely.

        Args:
            original_name: Filename supplied by the client
            file_stream: Async iterator yielding file chunks
            declared_length: Size announced by the client, if known

        Returns:
            The generated storage key and the number of bytes written

        Raises:
            InvalidInputError: If the upload is empty or the name is unusable
            FileSizeExceededError: If the file exceeds the maximum size
            StorageUnavailableError: If the backing store fails
        """
        pass

    @abstractmethod
    async def read_file(self, storage_key: str) -> FileContent | None:
        """
        Read a stored file.

        Args:
            storage_key: Key returned by save_file

        Returns:
            File content with its resolved content type, or None if the key
            does not exist

        Raises:
            StorageUnavailableError: If the file exists but cannot be read
        """
        pass

    @abstractmethod
    async def list_files(self) -> list[StoredFileInfo]:
        """
        List every stored file, most recently created first.

        Returns:
            File summaries; an empty list if the backing store is inaccessible
        """
        pass

    @abstractmethod
    async def delete_file(self, storage_key: str) -> bool:
        """
        Delete a stored file.

        Args:
            storage_key: Key returned by save_file

        Returns:
            True if the file was deleted, False if it does not exist

        Raises:
            StorageUnavailableError: If the file exists but removal fails
        """
        pass

    @abstractmethod
    def file_exists(self, storage_key: str) -> bool:
        """
        Check if a file exists in storage.

        Args:
            storage_key: Key returned by save_file

        Returns:
            True if file exists, False otherwise
        """
        pass
