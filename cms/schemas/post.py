"""
Post request/response schemas.

``category`` and ``tags`` carry record ids; the post service checks that
they exist before anything is written.
"""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, ConfigDict, Field

from cms.configs.settings import DESCRIPTION_MAX_LENGTH, POST_TITLE_MAX_LENGTH
from cms.models.post import PostStatus
from cms.schemas.common import CamelModel, RecordResponse


class PostCreate(CamelModel):
    """Post creation body (excludes generated fields and counters)."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Hello World",
                "content": "First post on the new site.",
                "author": "Jane",
                "status": "draft",
                "tags": [],
            },
        },
    )

    title: str = Field(min_length=1, max_length=POST_TITLE_MAX_LENGTH, description="Post title")
    content: str = Field(min_length=1, description="Post body")
    author: str = Field(min_length=1, max_length=100, description="Author display name")
    excerpt: str | None = Field(default=None, max_length=500)
    category: UUID | None = Field(default=None, description="Category ID")
    tags: list[UUID] = Field(default_factory=list, description="Tag IDs")
    status: PostStatus = Field(default=PostStatus.DRAFT, description="Post status")
    meta_title: str | None = Field(default=None, max_length=POST_TITLE_MAX_LENGTH)
    meta_description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    is_featured: bool = False
    published_at: datetime | None = Field(default=None, description="Defaults to creation time")


class PostUpdate(CamelModel):
    """Partial post update; omitted fields keep their stored values."""

    title: str | None = Field(default=None, min_length=1, max_length=POST_TITLE_MAX_LENGTH)
    content: str | None = Field(default=None, min_length=1)
    author: str | None = Field(default=None, min_length=1, max_length=100)
    excerpt: str | None = Field(default=None, max_length=500)
    category: UUID | None = None
    tags: list[UUID] | None = None
    status: PostStatus | None = None
    meta_title: str | None = Field(default=None, max_length=POST_TITLE_MAX_LENGTH)
    meta_description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    is_featured: bool | None = None
    published_at: datetime | None = None


class PostResponse(RecordResponse):
    title: str
    slug: str
    content: str
    author: str
    excerpt: str | None = None
    category: UUID | None = Field(
        default=None,
        validation_alias=AliasChoices("category_id", "category"),
    )
    tags: list[str] = []
    image: str | None = None
    status: PostStatus
    meta_title: str | None = None
    meta_description: str | None = None
    is_featured: bool = False
    published_at: datetime
    likes: int = 0
    views: int = 0
    comments: list[str] = []
