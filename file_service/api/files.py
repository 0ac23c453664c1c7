"""
File API endpoints.

This module exposes the storage backend over HTTP: upload, download, list,
delete and a health probe. Each storage outcome is mapped to its own
structured response so clients can tell bad input, missing files and
storage faults apart.
"""
from datetime import datetime, timezone
from typing import AsyncIterator
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status

from file_service.config import settings
from file_service.dependencies.storage import get_storage
from file_service.logging_config import setup_logging
from file_service.schemas.common import ApiResponse
from file_service.schemas.files import FileInfo, HealthData, UploadResponse
from file_service.storage.base import StorageBackend
from file_service.storage.exceptions import (
    FileSizeExceededError,
    InvalidInputError,
    StorageUnavailableError,
)

router = APIRouter(prefix="/files", tags=["files"])

logger = setup_logging()

STORAGE_UNAVAILABLE_MESSAGE = "Storage is temporarily unavailable, please retry"


def _upload_failure(message: str) -> dict:
    return UploadResponse(success=False, message=message).model_dump(by_alias=True, mode="json")


def _api_failure(message: str) -> dict:
    return ApiResponse(success=False, message=message).model_dump(by_alias=True, mode="json")


def _content_disposition(filename: str) -> str:
    """Build an attachment header, RFC 5987 encoded when the name is not plain ASCII."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


async def _iter_upload(file: UploadFile) -> AsyncIterator[bytes]:
    chunk_size = settings.UPLOAD_CHUNK_SIZE_KB * 1024
    while True:
        chunk = await file.read(chunk_size)
        if not chunk:
            break
        yield chunk


@router.post(
    "/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": UploadResponse, "description": "Empty, unnamed or oversized upload"},
        503: {"model": UploadResponse, "description": "Storage unavailable"},
    },
)
async def upload_file(
    file: UploadFile | None = File(None, description="File to upload"),
    storage: StorageBackend = Depends(get_storage),
):
    """
    Upload a file.

    The file is stored under ``<uuid>_<original filename>`` and that key is
    returned as ``fileName``; use it to download or delete the file.

    Example:
    ```bash
    curl -X POST http://localhost:8000/api/files/upload \\
      -F "file=@report.pdf"
    ```
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_upload_failure("No file uploaded or file is empty"),
        )

    try:
        stored = await storage.save_file(
            original_name=file.filename,
            file_stream=_iter_upload(file),
            declared_length=file.size,
        )
    except InvalidInputError as e:
        logger.warning(f"Upload rejected: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_upload_failure(str(e)),
        )
    except FileSizeExceededError as e:
        logger.warning(f"Upload rejected: {str(e)}")
        max_size_mb = e.max_size // (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_upload_failure(f"File size exceeds {max_size_mb}MB limit"),
        )
    except StorageUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=_upload_failure(STORAGE_UNAVAILABLE_MESSAGE),
        )
    finally:
        await file.close()

    return UploadResponse(
        success=True,
        message="File uploaded successfully",
        file_name=stored.storage_key,
        file_size=stored.size,
    )


@router.get(
    "/download/{file_name}",
    response_class=Response,
    responses={
        200: {"content": {"application/octet-stream": {}}, "description": "File content"},
        404: {"model": ApiResponse, "description": "File not found"},
        503: {"model": ApiResponse, "description": "Storage unavailable"},
    },
)
async def download_file(
    file_name: str,
    storage: StorageBackend = Depends(get_storage),
):
    """
    Download a file by its storage key.

    The response carries the content type resolved from the file extension
    and an attachment Content-Disposition with the storage key as filename.
    """
    try:
        result = await storage.read_file(file_name)
    except StorageUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=_api_failure(STORAGE_UNAVAILABLE_MESSAGE),
        )

    if result is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_api_failure("File not found"),
        )

    return Response(
        content=result.content,
        media_type=result.content_type,
        headers={"Content-Disposition": _content_disposition(result.storage_key)},
    )


@router.get(
    "/list",
    response_model=ApiResponse[list[FileInfo]],
    status_code=status.HTTP_200_OK,
)
async def list_files(storage: StorageBackend = Depends(get_storage)):
    """
    List all stored files, most recently created first.

    Always returns 200. An unreadable storage directory is reported as an
    empty list and logged on the server.
    """
    files = await storage.list_files()

    return ApiResponse[list[FileInfo]](
        success=True,
        message="Files retrieved successfully",
        data=[FileInfo.from_stored(info) for info in files],
    )


@router.delete(
    "/delete/{file_name}",
    response_model=ApiResponse,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"model": ApiResponse, "description": "File not found"},
        503: {"model": ApiResponse, "description": "Storage unavailable"},
    },
)
async def delete_file(
    file_name: str,
    storage: StorageBackend = Depends(get_storage),
):
    """Delete a file by its storage key."""
    try:
        deleted = await storage.delete_file(file_name)
    except StorageUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=_api_failure("File could not be deleted, please retry"),
        )

    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=_api_failure("File not found"),
        )

    return ApiResponse(success=True, message="File deleted successfully")


@router.get(
    "/health",
    response_model=ApiResponse[HealthData],
    status_code=status.HTTP_200_OK,
)
async def health():
    """Liveness probe."""
    return ApiResponse[HealthData](
        success=True,
        message="File Service API is running",
        data=HealthData(timestamp=datetime.now(timezone.utc)),
    )
