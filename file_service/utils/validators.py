"""
Filename and storage key validation.

Storage keys double as on-disk names inside one flat directory, so neither
client filenames nor keys may carry path components.
"""
import re

# Longest name most filesystems accept for a single directory entry
MAX_KEY_BYTES = 255

PATH_SEPARATORS = re.compile(r"[\\/]")


class FilenameValidationError(Exception):
    """Filename validation error exception"""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Invalid filename {filename!r}: {reason}")


def sanitize_original_name(filename: str | None) -> str:
    """
    Reduce a client-supplied filename to its final path component.

    Browsers and HTTP clients sometimes send full paths such as
    ``C:\\Users\\me\\report.pdf``; only ``report.pdf`` is kept.

    Raises:
        FilenameValidationError: When nothing usable remains
    """
    if not filename:
        raise FilenameValidationError("", "filename is required")

    if "\x00" in filename:
        raise FilenameValidationError(filename, "filename contains a NUL byte")

    name = PATH_SEPARATORS.split(filename)[-1]

    if not name.strip() or name in (".", ".."):
        raise FilenameValidationError(filename, "filename has no usable name component")

    return name


def is_valid_storage_key(storage_key: str) -> bool:
    """
    Check whether a string can name an entry of the flat storage namespace.

    Keys never contain path separators or NUL bytes and never start with a
    dot, which keeps lookups out of parent directories and the hidden
    temporary upload area.
    """
    if not storage_key or storage_key.startswith("."):
        return False
    if "\x00" in storage_key or PATH_SEPARATORS.search(storage_key):
        return False
    return len(storage_key.encode("utf-8", errors="surrogateescape")) <= MAX_KEY_BYTES
