"""Response envelope and shared schema building blocks."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input and serializes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class RecordResponse(CamelModel):
    """Fields every stored record exposes."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(description="Record ID")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")


class ApiResponse[DataT](BaseModel):
    """
    The envelope returned by every endpoint.

    Examples:
        >>> ApiResponse[dict](success=True, message="Category created", data={"id": "..."})
    """

    success: bool = Field(description="Whether the operation succeeded")
    message: str = Field(description="Human readable outcome")
    data: DataT | None = Field(default=None, description="Payload, null on failure")


class Paginated[ItemT](BaseModel):
    """One page of a newest-first listing."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[ItemT]
    total: int = Field(ge=0, description="Number of records in the collection")
    page: int = Field(ge=1, description="1-based page number")
    limit: int = Field(ge=1, description="Page size")
    total_pages: int = Field(ge=0, alias="totalPages", description="Number of pages")


class ErrorResponse(BaseModel):
    """Failure envelope, optionally carrying per-field validation errors."""

    success: bool = False
    message: str
    data: None = None
    errors: list[dict[str, Any]] | None = None
