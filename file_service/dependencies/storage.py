"""
Storage dependency injection for FastAPI.

This module provides FastAPI dependency functions for injecting
storage backends into endpoints.
"""
from file_service.config import settings
from file_service.storage.base import StorageBackend
from file_service.storage.local import LocalStorageBackend


def get_storage() -> StorageBackend:
    """
    Return storage backend based on configuration.

    Tests override this dependency to point the backend at a temporary
    directory.

    Returns:
        StorageBackend instance

    Raises:
        ValueError: If STORAGE_BACKEND is not supported
    """
    if settings.STORAGE_BACKEND == "local":
        return LocalStorageBackend(
            base_path=settings.STORAGE_BASE_PATH,
            max_size_mb=settings.MAX_UPLOAD_SIZE_MB,
        )

    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND}")
