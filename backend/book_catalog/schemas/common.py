"""Common Pydantic schemas."""
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class ResultResponse(BaseModel, Generic[DataT]):
    """Successful response wrapping the operation's value."""

    result: DataT


class ErrorResponse(BaseModel):
    """Error response schema."""

    error_message: str = Field(..., serialization_alias="errorMessage")
