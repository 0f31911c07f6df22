"""Tag routes."""

from cms.dependencies.dependencies import get_tag_service
from cms.routes.crud import build_crud_router
from cms.schemas import TagCreate, TagResponse, TagUpdate

router = build_crud_router(
    prefix="/tags",
    tag="🏷️ Tags",
    service_dependency=get_tag_service,
    create_schema=TagCreate,
    update_schema=TagUpdate,
    response_schema=TagResponse,
    label="Tag",
    plural="Tags",
)
