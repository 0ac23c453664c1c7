"""
File API schemas.

This module defines Pydantic schemas for the file endpoints: upload results,
listing entries and the health probe payload.
"""
from datetime import datetime

from file_service.schemas.common import CamelModel
from file_service.storage.models import StoredFileInfo


class UploadResponse(CamelModel):
    """Upload result."""

    success: bool
    message: str
    file_name: str | None = None
    """Storage key the file was saved under."""

    file_size: int | None = None
    """Number of bytes written."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "success": True,
                    "message": "File uploaded successfully",
                    "fileName": "0b6a8c4e-8d7e-4c1f-9a55-2f3f1f0c9d1e_report.pdf",
                    "fileSize": 10,
                }
            ]
        }
    }


class FileInfo(CamelModel):
    """Stored file summary."""

    file_name: str
    size: int
    created_date: datetime
    content_type: str

    @classmethod
    def from_stored(cls, info: StoredFileInfo) -> "FileInfo":
        return cls(
            file_name=info.storage_key,
            size=info.size,
            created_date=info.created_at,
            content_type=info.content_type,
        )


class HealthData(CamelModel):
    timestamp: datetime
