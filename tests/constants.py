import re


class URLs:
    UPLOAD = "/api/files/upload"
    DOWNLOAD = "/api/files/download/{}"
    LIST = "/api/files/list"
    DELETE = "/api/files/delete/{}"
    HEALTH = "/api/files/health"


UUID4_PREFIX = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}_"


def storage_key_pattern(original_name: str) -> str:
    """Regex matching a storage key generated for original_name."""
    return f"^{UUID4_PREFIX}{re.escape(original_name)}$"
