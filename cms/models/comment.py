"""Threaded comment table."""

from typing import cast
from uuid import UUID

from sqlalchemy import Integer, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, String

from cms.models.base import DocumentBase, IdList


class CommentDB(DocumentBase, table=True):
    """
    A comment on a post, optionally replying to another comment.

    ``replies`` holds the ids of direct replies in insertion order.
    """

    __tablename__ = cast("declared_attr[str]", "comments")

    post_id: UUID = Field(nullable=False, index=True, description="Post ID")
    author: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Author display name",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Comment body",
    )
    parent_id: UUID | None = Field(default=None, index=True, description="Parent comment ID")
    replies: list[str] = Field(
        default_factory=list,
        sa_column=Column(IdList, nullable=False),
        description="Reply comment IDs",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Like count",
    )
