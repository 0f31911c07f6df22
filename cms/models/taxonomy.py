"""Category and tag tables."""

from typing import cast

from pydantic import ConfigDict
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, String

from cms.configs.settings import (
    CATEGORY_NAME_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    SLUG_MAX_LENGTH,
    TAG_NAME_MAX_LENGTH,
)
from cms.models.base import DocumentBase


class CategoryDB(DocumentBase, table=True):
    """A named grouping that a post may belong to."""

    __tablename__ = cast("declared_attr[str]", "categories")

    name: str = Field(
        sa_column=Column(String(CATEGORY_NAME_MAX_LENGTH), unique=True, nullable=False),
        description="Category name (unique)",
    )
    description: str = Field(
        default="",
        sa_column=Column(String(DESCRIPTION_MAX_LENGTH), nullable=False, default=""),
        description="Category description",
    )
    slug: str = Field(
        sa_column=Column(String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Technology",
                "description": "Posts about software and hardware",
                "slug": "technology",
            },
        },
    )


class TagDB(DocumentBase, table=True):
    """A label attached to posts."""

    __tablename__ = cast("declared_attr[str]", "tags")

    name: str = Field(
        sa_column=Column(String(TAG_NAME_MAX_LENGTH), unique=True, nullable=False),
        description="Tag name (unique)",
    )
    slug: str = Field(
        sa_column=Column(String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
