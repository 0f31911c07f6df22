"""Category and tag repositories."""

from cms.models.taxonomy import CategoryDB, TagDB
from cms.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[CategoryDB]):
    """Repository for Category database operations."""

    model = CategoryDB
    label = "Category"


class TagRepository(BaseRepository[TagDB]):
    """Repository for Tag database operations."""

    model = TagDB
    label = "Tag"
