"""Category and tag request/response schemas."""

from pydantic import ConfigDict, Field

from cms.configs.settings import (
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_NAME_MIN_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    TAG_NAME_MAX_LENGTH,
    TAG_NAME_MIN_LENGTH,
)
from cms.schemas.common import CamelModel, RecordResponse


class CategoryCreate(CamelModel):
    """Category creation body. The slug is always derived from the name."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "Technology", "description": "Gadgets and code"}},
    )

    name: str = Field(
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
        description="Category name (unique)",
    )
    description: str = Field(
        default="",
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Category description",
    )


class CategoryUpdate(CamelModel):
    """Partial category update; omitted fields keep their stored values."""

    name: str | None = Field(
        default=None,
        min_length=CATEGORY_NAME_MIN_LENGTH,
        max_length=CATEGORY_NAME_MAX_LENGTH,
    )
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)


class CategoryResponse(RecordResponse):
    name: str
    description: str = ""
    slug: str


class TagCreate(CamelModel):
    """Tag creation body."""

    name: str = Field(
        min_length=TAG_NAME_MIN_LENGTH,
        max_length=TAG_NAME_MAX_LENGTH,
        description="Tag name (unique)",
        examples=["python"],
    )


class TagUpdate(CamelModel):
    name: str | None = Field(
        default=None,
        min_length=TAG_NAME_MIN_LENGTH,
        max_length=TAG_NAME_MAX_LENGTH,
    )


class TagResponse(RecordResponse):
    name: str
    slug: str
