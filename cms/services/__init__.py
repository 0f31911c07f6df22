"""Service layer: gateways that return result records instead of raising."""

from cms.services.comments import CommentService
from cms.services.content import ContentService
from cms.services.media import ImageUploader, MediaService
from cms.services.page import PageService
from cms.services.post import PostService
from cms.services.taxonomy import CategoryService, TagService
from cms.utils.results import PageData, ServiceResult

__all__ = [
    "CategoryService",
    "CommentService",
    "ContentService",
    "ImageUploader",
    "MediaService",
    "PageData",
    "PageService",
    "PostService",
    "ServiceResult",
    "TagService",
]
