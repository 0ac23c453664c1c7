"""Result records returned by storage backends."""
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StoredFile:
    """Outcome of a successful upload."""

    storage_key: str
    size: int


@dataclass(frozen=True)
class FileContent:
    """Full content of a stored file, ready to be sent to a client."""

    storage_key: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class StoredFileInfo:
    """Listing entry for a stored file."""

    storage_key: str
    size: int
    created_at: datetime
    content_type: str
