"""Request-scoped dependencies: services bound to the request session."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cms.configs import settings
from cms.db import get_session
from cms.services import (
    CategoryService,
    CommentService,
    MediaService,
    PageService,
    PostService,
    TagService,
)
from cms.services.storage import StorageService, get_storage_service

SessionDep = Annotated[AsyncSession, Depends(get_session)]


@dataclass(frozen=True)
class PaginationQuery:
    """
    Query container for pagination.

    Parameters
    ----------
    page : int
        1-based page number.
    limit : int
        Maximum number of records to return.
    """

    page: int = 1
    limit: int = settings.DEFAULT_PAGE_SIZE


def get_pagination_query(
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=settings.MAX_PAGE_SIZE, description="Maximum number of records to return"),
    ] = settings.DEFAULT_PAGE_SIZE,
) -> PaginationQuery:
    """
    Dependency to construct `PaginationQuery` from query parameters.

    Returns
    -------
    PaginationQuery
        Aggregated pagination parameters.
    """
    return PaginationQuery(page=page, limit=limit)


PaginationDep = Annotated[PaginationQuery, Depends(get_pagination_query)]


def get_media_storage() -> StorageService:
    """Storage backend for uploads; overridden in tests."""
    return get_storage_service()


StorageDep = Annotated[StorageService, Depends(get_media_storage)]


def get_category_service(session: SessionDep) -> CategoryService:
    return CategoryService(session)


def get_tag_service(session: SessionDep) -> TagService:
    return TagService(session)


def get_page_service(session: SessionDep) -> PageService:
    return PageService(session)


def get_post_service(session: SessionDep, storage: StorageDep) -> PostService:
    return PostService(session, storage)


def get_comment_service(session: SessionDep) -> CommentService:
    return CommentService(session)


def get_media_service(session: SessionDep, storage: StorageDep) -> MediaService:
    return MediaService(session, storage)


CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
TagServiceDep = Annotated[TagService, Depends(get_tag_service)]
PageServiceDep = Annotated[PageService, Depends(get_page_service)]
PostServiceDep = Annotated[PostService, Depends(get_post_service)]
CommentServiceDep = Annotated[CommentService, Depends(get_comment_service)]
MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
