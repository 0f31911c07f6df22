from cms.dependencies.dependencies import (
    CategoryServiceDep,
    CommentServiceDep,
    MediaServiceDep,
    PageServiceDep,
    PaginationDep,
    PaginationQuery,
    PostServiceDep,
    SessionDep,
    StorageDep,
    TagServiceDep,
    get_media_storage,
    get_pagination_query,
)

__all__ = [
    "CategoryServiceDep",
    "CommentServiceDep",
    "MediaServiceDep",
    "PageServiceDep",
    "PaginationDep",
    "PaginationQuery",
    "PostServiceDep",
    "SessionDep",
    "StorageDep",
    "TagServiceDep",
    "get_media_storage",
    "get_pagination_query",
]
