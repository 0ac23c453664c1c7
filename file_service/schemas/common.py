from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ApiResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str = ""
    data: T | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
