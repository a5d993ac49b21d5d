"""
Shared API models: camelCase base model and the response envelope.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope wrapping every payload."""
    success: bool = True
    data: T
    message: Optional[str] = None
    timestamp: str


class ErrorDetail(BaseModel):
    """Error body inside the error envelope."""
    code: int
    message: str
    details: Optional[Any] = None


class ErrorResponse(BaseModel):
    """Error envelope."""
    success: bool = False
    error: ErrorDetail
    timestamp: str
