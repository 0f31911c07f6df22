"""Category and tag services."""

from cms.models.taxonomy import CategoryDB, TagDB
from cms.repositories.taxonomy import CategoryRepository, TagRepository
from cms.schemas.category import CategoryCreate, CategoryUpdate, TagCreate, TagUpdate
from cms.services.content import ContentService


class CategoryService(ContentService[CategoryDB, CategoryCreate, CategoryUpdate]):
    """Categories are unique by name; the slug follows the name at creation."""

    repository_class = CategoryRepository
    create_schema = CategoryCreate
    update_schema = CategoryUpdate
    label = "Category"
    plural = "Categories"


class TagService(ContentService[TagDB, TagCreate, TagUpdate]):
    repository_class = TagRepository
    create_schema = TagCreate
    update_schema = TagUpdate
    label = "Tag"
    plural = "Tags"
