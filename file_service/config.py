from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_TITLE: str = "File Service API"

    # Storage settings
    STORAGE_BACKEND: str = "local"  # local only
    STORAGE_BASE_PATH: str = "uploads"
    MAX_UPLOAD_SIZE_MB: int = 100
    UPLOAD_CHUNK_SIZE_KB: int = 64

    # Request body guard, leaves room for multipart framing around the file part
    MAX_REQUEST_BODY_SIZE_MB: int = 101

    # CORS settings
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Read overrides from .env and ignore keys this class does not define
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
