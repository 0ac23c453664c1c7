"""
Local filesystem storage implementation.

This module provides a local filesystem implementation of the storage backend
with async file operations over a single flat directory. The directory
listing is the source of truth: there is no manifest or in-memory index.
"""
import errno
import os
import stat
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncIterator

import aiofiles
import aiofiles.os

from file_service.config import settings
from file_service.logging_config import setup_logging
from file_service.storage.base import StorageBackend
from file_service.storage.content_types import resolve_content_type
from file_service.storage.exceptions import (
    FileSizeExceededError,
    InvalidInputError,
    StorageUnavailableError,
)
from file_service.storage.models import FileContent, StoredFile, StoredFileInfo
from file_service.utils.ids import generate_storage_key
from file_service.utils.validators import FilenameValidationError, is_valid_storage_key

logger = setup_logging()

# Filesystems without hard link support report one of these
LINK_UNSUPPORTED_ERRNOS = {errno.EPERM, errno.EOPNOTSUPP, getattr(errno, "ENOTSUP", errno.EOPNOTSUPP)}


class LocalStorageBackend(StorageBackend):
    """
    Local filesystem storage with async operations.

    Layout:
        <base_path>/<storage_key>          published files
        <base_path>/.tmp/<uuid>.part       uploads still being written

    Uploads are written to the hidden temp area first and published under
    their storage key only once complete, so readers never see partial data.
    """

    def __init__(self, base_path: str | None = None, max_size_mb: int | None = None):
        """
        Initialize local storage backend.

        Args:
            base_path: Directory holding the files (default from config)
            max_size_mb: Maximum file size in MB (default from config)
        """
        self.base_path = Path(base_path or settings.STORAGE_BASE_PATH)
        if max_size_mb is None:
            max_size_mb = settings.MAX_UPLOAD_SIZE_MB
        self.max_size_bytes = max_size_mb * 1024 * 1024

        # Operations report their own faults, so a failure here is only logged
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(
                f"Failed to create storage directory {self.base_path}: {str(e)}",
                exc_info=True,
            )

    async def save_file(
        self,
        original_name: str | None,
        file_stream: AsyncIterator[bytes],
        declared_length: int | None = None,
    ) -> StoredFile:
        """
        Stream an upload to the temp area, then publish it under a new key.

        Size and emptiness are checked against the declared length before
        anything is written, and again against the bytes actually received.

        Raises:
            InvalidInputError: If the upload is empty or the name is unusable
            FileSizeExceededError: If the file exceeds maximum size
            StorageUnavailableError: If the filesystem operation fails
        """
        if declared_length is not None:
            if declared_length == 0:
                raise InvalidInputError("No file uploaded or file is empty")
            if declared_length > self.max_size_bytes:
                raise FileSizeExceededError(declared_length, self.max_size_bytes)

        try:
            storage_key = generate_storage_key(original_name)
        except FilenameValidationError as e:
            raise InvalidInputError(str(e)) from e

        temp_path = self._get_temp_file_path()
        file_path = self._get_file_path(storage_key)
        total_size = 0

        try:
            try:
                temp_path.parent.mkdir(parents=True, exist_ok=True)

                async with aiofiles.open(temp_path, "xb") as f:
                    async for chunk in file_stream:
                        total_size += len(chunk)

                        if total_size > self.max_size_bytes:
                            raise FileSizeExceededError(total_size, self.max_size_bytes)

                        await f.write(chunk)

                if total_size == 0:
                    raise InvalidInputError("No file uploaded or file is empty")

                self._publish(temp_path, file_path)

            except OSError as e:
                logger.error(f"Failed to save file {storage_key}: {str(e)}", exc_info=True)
                raise StorageUnavailableError("save file", storage_key) from e

        finally:
            # Also runs on cancellation, so an aborted upload leaves nothing behind
            self._discard_temp_file(temp_path)

        logger.info(f"File uploaded successfully: {storage_key} ({total_size} bytes)")
        return StoredFile(storage_key=storage_key, size=total_size)

    async def read_file(self, storage_key: str) -> FileContent | None:
        """
        Read the full content of a stored file.

        Returns:
            File content, or None if the key is not in the namespace

        Raises:
            StorageUnavailableError: If the file exists but cannot be read
        """
        if not is_valid_storage_key(storage_key):
            return None

        file_path = self._get_file_path(storage_key)

        try:
            async with aiofiles.open(file_path, "rb") as f:
                content = await f.read()
        except (FileNotFoundError, IsADirectoryError):
            return None
        except OSError as e:
            logger.error(f"Failed to read file {storage_key}: {str(e)}", exc_info=True)
            raise StorageUnavailableError("read file", storage_key) from e

        return FileContent(
            storage_key=storage_key,
            content=content,
            content_type=resolve_content_type(storage_key),
        )

    async def list_files(self) -> list[StoredFileInfo]:
        """
        List published files, most recently created first.

        An inaccessible storage directory yields an empty list. The fault is
        logged because callers cannot tell it apart from an empty store.
        """
        try:
            paths = list(self.base_path.iterdir())
        except OSError as e:
            logger.error(
                f"Failed to list storage directory {self.base_path}: {str(e)}",
                exc_info=True,
            )
            return []

        files = []

        for path in paths:
            # Hidden entries hold in-flight uploads
            if path.name.startswith("."):
                continue

            try:
                stat_result = path.stat()
            except FileNotFoundError:
                # Deleted while listing
                continue
            except OSError as e:
                logger.warning(f"Skipping unreadable entry {path.name}: {str(e)}")
                continue

            if not stat.S_ISREG(stat_result.st_mode):
                continue

            files.append(
                StoredFileInfo(
                    storage_key=path.name,
                    size=stat_result.st_size,
                    created_at=datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc),
                    content_type=resolve_content_type(path.name),
                )
            )

        files.sort(key=lambda info: info.created_at, reverse=True)
        return files

    async def delete_file(self, storage_key: str) -> bool:
        """
        Delete a stored file with a single unlink.

        Returns:
            True if deleted, False if the key is not in the namespace

        Raises:
            StorageUnavailableError: If the file exists but cannot be removed
        """
        if not is_valid_storage_key(storage_key):
            return False

        file_path = self._get_file_path(storage_key)

        try:
            await aiofiles.os.remove(file_path)
        except (FileNotFoundError, IsADirectoryError):
            return False
        except OSError as e:
            logger.error(f"Error deleting file {storage_key}: {str(e)}", exc_info=True)
            raise StorageUnavailableError("delete file", storage_key) from e

        logger.info(f"File deleted successfully: {storage_key}")
        return True

    def file_exists(self, storage_key: str) -> bool:
        """
        Check if a file exists in storage.

        Args:
            storage_key: Key returned by save_file

        Returns:
            True if file exists, False otherwise
        """
        if not is_valid_storage_key(storage_key):
            return False
        return self._get_file_path(storage_key).is_file()

    def _get_file_path(self, storage_key: str) -> Path:
        """Published files live directly in the base directory."""
        return self.base_path / storage_key

    def _get_temp_file_path(self) -> Path:
        """
        Calculate a unique temporary path for an upload in progress.

        Structure: <base_path>/.tmp/<uuid>.part
        """
        return self.base_path / ".tmp" / f"{uuid.uuid4().hex}.part"

    def _publish(self, temp_path: Path, file_path: Path) -> None:
        """
        Make a fully written temp file visible under its storage key.

        A hard link fails if the key already exists, so a published file is
        never replaced. Where hard links are unsupported the temp file is
        renamed instead, after checking the key is still free. That check
        and the rename are two steps, so on such filesystems a key published
        between them could still be replaced.
        Keys carry a random uuid4 prefix, so two uploads racing for the same
        key do not occur in practice.

        Raises:
            FileExistsError: If the key is already taken
        """
        try:
            os.link(temp_path, file_path)
        except FileExistsError:
            raise
        except OSError as e:
            if e.errno not in LINK_UNSUPPORTED_ERRNOS:
                raise
            if os.path.lexists(file_path):
                raise FileExistsError(errno.EEXIST, "Storage key already exists", str(file_path)) from e
            os.replace(temp_path, file_path)

    def _discard_temp_file(self, temp_path: Path) -> None:
        try:
            temp_path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove temporary upload {temp_path.name}: {str(e)}")
