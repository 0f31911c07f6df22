from cms.routes.categories import router as categories_router
from cms.routes.comments import router as comments_router
from cms.routes.media import router as media_router
from cms.routes.pages import router as pages_router
from cms.routes.posts import router as posts_router
from cms.routes.tags import router as tags_router

__all__ = [
    "categories_router",
    "comments_router",
    "media_router",
    "pages_router",
    "posts_router",
    "tags_router",
]
