from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from file_service.api.router import router as api_router
from file_service.config import settings
from file_service.dependencies.storage import get_storage
from file_service.logging_config import setup_logging
from file_service.middleware.body_limit import body_limit_middleware
from file_service.schemas.common import ErrorResponse

# Setup application logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Building the backend creates the storage directory if it is missing;
    # honor test overrides so tests never touch the real directory
    storage_factory = app.dependency_overrides.get(get_storage, get_storage)
    storage = storage_factory()
    logger.info(f"File Service API started with storage backend {type(storage).__name__}")
    yield


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

app.middleware("http")(body_limit_middleware)

# Added last so it wraps everything, including 413 responses from the body guard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Unwrap the 'detail' field from HTTPException responses."""
    content = exc.detail

    if isinstance(content, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=content
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error="Error", message=str(content)).model_dump(),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # Full stack trace stays in the logs
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {str(exc)}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    # Clients only get a static message
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
        ).model_dump(),
    )
