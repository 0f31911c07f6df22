"""Blog post database model using SQLModel."""

from datetime import datetime
from enum import StrEnum
from typing import cast
from uuid import UUID

from pydantic import ConfigDict
from sqlalchemy import Boolean, DateTime, Index, Integer, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, String

from cms.configs.settings import DESCRIPTION_MAX_LENGTH, POST_TITLE_MAX_LENGTH, SLUG_MAX_LENGTH
from cms.models.base import DocumentBase, IdList
from cms.utils.helpers import utcnow


class PostStatus(StrEnum):
    """Publication state of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"
    PRIVATE = "private"


class PostDB(DocumentBase, table=True):
    """
    Blog post table.

    ``category_id`` and the ids held in ``tags`` and ``comments`` are plain
    values rather than foreign keys; the services check that referenced
    records exist.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_status_created", "status", "created_at"),)

    title: str = Field(
        sa_column=Column(String(POST_TITLE_MAX_LENGTH), unique=True, nullable=False),
        description="Post title (unique)",
    )
    slug: str = Field(
        sa_column=Column(String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Post body",
    )
    author: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Author display name",
    )
    excerpt: str | None = Field(
        default=None,
        sa_column=Column(String(500)),
        description="Short summary",
    )
    category_id: UUID | None = Field(
        default=None,
        index=True,
        description="Category ID",
    )
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(IdList, nullable=False),
        description="Tag IDs",
    )
    image: str | None = Field(
        default=None,
        sa_column=Column(String(500)),
        description="Stored path of the featured image",
    )
    status: str = Field(
        default=PostStatus.DRAFT.value,
        sa_column=Column(String(20), nullable=False, index=True, default=PostStatus.DRAFT.value),
        description="Post status (draft, published, private)",
    )
    meta_title: str | None = Field(
        default=None,
        sa_column=Column(String(POST_TITLE_MAX_LENGTH)),
        description="SEO title",
    )
    meta_description: str | None = Field(
        default=None,
        sa_column=Column(String(DESCRIPTION_MAX_LENGTH)),
        description="SEO description",
    )
    is_featured: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Pinned on the front page",
    )
    published_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Publication timestamp",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Like count",
    )
    views: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="View count",
    )
    comments: list[str] = Field(
        default_factory=list,
        sa_column=Column(IdList, nullable=False),
        description="Comment IDs in insertion order",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Hello World",
                "slug": "hello-world",
                "content": "First post.",
                "author": "Jane",
                "status": "draft",
                "tags": [],
                "comments": [],
            },
        },
    )
