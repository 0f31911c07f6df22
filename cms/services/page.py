"""Page service."""

from cms.models.page import PageDB
from cms.repositories.page import PageRepository
from cms.schemas.page import PageCreate, PageUpdate
from cms.services.content import ContentService


class PageService(ContentService[PageDB, PageCreate, PageUpdate]):
    """Pages are unique by title and slugged from it."""

    repository_class = PageRepository
    create_schema = PageCreate
    update_schema = PageUpdate
    label = "Page"
    plural = "Pages"
    unique_field = "title"
    slug_field = "title"
    nullable_fields = frozenset({"meta_description"})
