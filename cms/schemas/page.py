"""Page request/response schemas."""

from pydantic import Field

from cms.configs.settings import DESCRIPTION_MAX_LENGTH, PAGE_TITLE_MAX_LENGTH, PAGE_TITLE_MIN_LENGTH
from cms.schemas.common import CamelModel, RecordResponse


class PageCreate(CamelModel):
    """Page creation body."""

    title: str = Field(
        min_length=PAGE_TITLE_MIN_LENGTH,
        max_length=PAGE_TITLE_MAX_LENGTH,
        description="Page title (unique)",
        examples=["About us"],
    )
    content: str = Field(min_length=1, description="Page body")
    meta_description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="SEO description",
    )


class PageUpdate(CamelModel):
    title: str | None = Field(
        default=None,
        min_length=PAGE_TITLE_MIN_LENGTH,
        max_length=PAGE_TITLE_MAX_LENGTH,
    )
    content: str | None = Field(default=None, min_length=1)
    meta_description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)


class PageResponse(RecordResponse):
    title: str
    content: str
    slug: str
    meta_description: str | None = None
