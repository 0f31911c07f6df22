"""Category routes."""

from cms.dependencies.dependencies import get_category_service
from cms.routes.crud import build_crud_router
from cms.schemas import CategoryCreate, CategoryResponse, CategoryUpdate

router = build_crud_router(
    prefix="/categories",
    tag="🗂️ Categories",
    service_dependency=get_category_service,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
    response_schema=CategoryResponse,
    label="Category",
    plural="Categories",
)
