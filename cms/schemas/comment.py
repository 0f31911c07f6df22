"""Comment request/response schemas."""

from uuid import UUID

from pydantic import AliasChoices, Field

from cms.schemas.common import CamelModel, RecordResponse


class CommentCreate(CamelModel):
    """A new comment; ``parent`` makes it a reply."""

    author: str = Field(min_length=1, max_length=100, examples=["Sam"])
    content: str = Field(min_length=1, examples=["Great post!"])
    parent: UUID | None = Field(default=None, description="Parent comment ID")


class CommentResponse(RecordResponse):
    post: UUID = Field(validation_alias=AliasChoices("post_id", "post"))
    author: str
    content: str
    parent: UUID | None = Field(default=None, validation_alias=AliasChoices("parent_id", "parent"))
    replies: list[str] = []
    likes: int = 0


class CommentThreadResponse(CommentResponse):
    """A comment with its direct replies expanded into records."""

    replies: list[CommentResponse] = []  # type: ignore[assignment]
