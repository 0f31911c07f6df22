"""Database models for the application."""

from cms.models.base import DocumentBase
from cms.models.comment import CommentDB
from cms.models.media import MediaDB
from cms.models.page import PageDB
from cms.models.post import PostDB, PostStatus
from cms.models.taxonomy import CategoryDB, TagDB

__all__ = [
    "DocumentBase",
    "CategoryDB",
    "TagDB",
    "PageDB",
    "PostDB",
    "PostStatus",
    "CommentDB",
    "MediaDB",
]
