"""Static page routes."""

from cms.dependencies.dependencies import get_page_service
from cms.routes.crud import build_crud_router
from cms.schemas import PageCreate, PageResponse, PageUpdate

router = build_crud_router(
    prefix="/pages",
    tag="📄 Pages",
    service_dependency=get_page_service,
    create_schema=PageCreate,
    update_schema=PageUpdate,
    response_schema=PageResponse,
    label="Page",
    plural="Pages",
)
