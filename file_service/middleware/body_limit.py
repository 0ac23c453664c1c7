from fastapi import Request
from fastapi.responses import JSONResponse

from file_service.config import settings
from file_service.schemas.common import ErrorResponse


async def body_limit_middleware(request: Request, call_next):
    """
    Request body size guard.

    Rejects requests whose declared Content-Length exceeds
    MAX_REQUEST_BODY_SIZE_MB with 413 before the body is read.
    Requests without the header fall through to the per-file size check
    enforced by the storage backend while streaming.
    """
    max_bytes = settings.MAX_REQUEST_BODY_SIZE_MB * 1024 * 1024

    content_length = request.headers.get("Content-Length")
    if content_length is not None:
        try:
            declared = int(content_length)
        except ValueError:
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(
                    error="Bad Request",
                    message="Invalid Content-Length header",
                ).model_dump(),
            )

        if declared > max_bytes:
            return JSONResponse(
                status_code=413,
                content=ErrorResponse(
                    error="Payload Too Large",
                    message=f"Request body exceeds {settings.MAX_REQUEST_BODY_SIZE_MB}MB limit",
                ).model_dump(),
            )

    return await call_next(request)
