"""
Result records returned by the service layer.

Services never raise to their callers; every outcome is a ``ServiceResult``
that the response mapper turns into the JSON envelope.
"""

from dataclasses import dataclass
from math import ceil
from typing import Any, Self

from starlette.status import HTTP_200_OK, HTTP_201_CREATED, HTTP_500_INTERNAL_SERVER_ERROR

from cms.errors import BaseAppError


@dataclass(frozen=True, slots=True)
class ServiceResult[DataT]:
    """
    Outcome of a service operation.

    Attributes:
        success: Whether the operation succeeded.
        message: Human readable outcome.
        data: Payload on success, None on failure.
        status_code: HTTP status the outcome maps to.
    """

    success: bool
    message: str
    data: DataT | None = None
    status_code: int = HTTP_200_OK

    @classmethod
    def ok(cls, data: DataT, message: str, status_code: int = HTTP_200_OK) -> Self:
        return cls(success=True, message=message, data=data, status_code=status_code)

    @classmethod
    def created(cls, data: DataT, message: str) -> Self:
        return cls.ok(data, message, HTTP_201_CREATED)

    @classmethod
    def fail(cls, message: str, status_code: int = HTTP_500_INTERNAL_SERVER_ERROR) -> Self:
        return cls(success=False, message=message, data=None, status_code=status_code)

    @classmethod
    def from_error(cls, error: BaseAppError) -> Self:
        return cls.fail(error.detail, error.status_code)


@dataclass(frozen=True, slots=True)
class PageData[ItemT]:
    """One page of a listing, together with the collection size."""

    items: list[ItemT]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.limit else 0

    def as_dict(self, items: list[Any] | None = None) -> dict[str, Any]:
        """Envelope payload; ``items`` overrides the raw records when given."""
        return {
            "items": self.items if items is None else items,
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
        }
