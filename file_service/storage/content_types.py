"""
Content type resolution for stored files.

The content type is never persisted; it is derived from the storage key's
extension every time a file is listed or downloaded.
"""
from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".txt": "text/plain",
    ".zip": "application/zip",
    ".rar": "application/x-rar-compressed",
}


def resolve_content_type(file_name: str) -> str:
    """
    Resolve the MIME type of a file from its extension.

    Only the last extension counts and matching is case-insensitive.

    Examples:
        >>> resolve_content_type("a.b.PDF")
        'application/pdf'
        >>> resolve_content_type("noext")
        'application/octet-stream'
    """
    extension = PurePath(file_name).suffix.lower()
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
