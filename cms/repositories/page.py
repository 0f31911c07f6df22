"""Page repository for database operations."""

from cms.models.page import PageDB
from cms.repositories.base import BaseRepository


class PageRepository(BaseRepository[PageDB]):
    """Repository for Page database operations."""

    model = PageDB
    label = "Page"
