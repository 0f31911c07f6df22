"""Repository layer for database operations."""

from cms.repositories.base import BaseRepository
from cms.repositories.comment import CommentRepository
from cms.repositories.media import MediaRepository
from cms.repositories.page import PageRepository
from cms.repositories.post import PostRepository
from cms.repositories.taxonomy import CategoryRepository, TagRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "TagRepository",
    "PageRepository",
    "PostRepository",
    "CommentRepository",
    "MediaRepository",
]
