"""
Storage key generation.

Keys are ``<uuid4>_<originalName>``: the random prefix keeps two uploads of
the same file apart while the suffix keeps the key readable and preserves the
extension used for content type resolution.
"""
import uuid

from file_service.utils.validators import (
    MAX_KEY_BYTES,
    FilenameValidationError,
    sanitize_original_name,
)


def generate_storage_key(original_name: str | None) -> str:
    """
    Generate a collision-resistant storage key for an uploaded file.

    Args:
        original_name: Filename supplied by the client

    Returns:
        Storage key such as ``'3f2b...e9_report.pdf'``

    Raises:
        FilenameValidationError: If the name is unusable or the resulting key
            would be too long for the backing directory
    """
    name = sanitize_original_name(original_name)
    storage_key = f"{uuid.uuid4()}_{name}"

    if len(storage_key.encode("utf-8", errors="surrogateescape")) > MAX_KEY_BYTES:
        raise FilenameValidationError(
            name, f"filename is too long (storage keys are limited to {MAX_KEY_BYTES} bytes)"
        )

    return storage_key
