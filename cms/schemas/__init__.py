"""Request and response schemas."""

from cms.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    TagCreate,
    TagResponse,
    TagUpdate,
)
from cms.schemas.comment import CommentCreate, CommentResponse, CommentThreadResponse
from cms.schemas.common import ApiResponse, CamelModel, ErrorResponse, Paginated, RecordResponse
from cms.schemas.media import MediaResponse, MediaUpdate
from cms.schemas.page import PageCreate, PageResponse, PageUpdate
from cms.schemas.post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ErrorResponse",
    "Paginated",
    "RecordResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "TagCreate",
    "TagResponse",
    "TagUpdate",
    "PageCreate",
    "PageUpdate",
    "PageResponse",
    "PostCreate",
    "PostResponse",
    "PostUpdate",
    "CommentCreate",
    "CommentResponse",
    "CommentThreadResponse",
    "MediaResponse",
    "MediaUpdate",
]
