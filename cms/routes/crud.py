"""
Router factory for the uniform content resources.

Categories, tags, pages and posts expose the same six endpoints:

  - ``GET    /``      list (``page`` / ``limit``)
  - ``POST   /``      create
  - ``GET    /{id}``  read
  - ``PUT    /{id}``  full update (empty body accepted)
  - ``PATCH  /{id}``  partial update (empty body rejected)
  - ``DELETE /{id}``  delete

Each handler calls one gateway method and hands the result record to
:func:`cms.utils.responses.to_response`.
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    HTTP_415_UNSUPPORTED_MEDIA_TYPE,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from cms.dependencies import PaginationDep
from cms.schemas.common import ApiResponse, ErrorResponse, Paginated
from cms.services.content import ContentService
from cms.utils.responses import to_response


def error_example(message: str, description: str) -> dict[str, Any]:
    return {
        "model": ErrorResponse,
        "description": description,
        "content": {
            "application/json": {
                "example": {"success": False, "message": message, "data": None},
            },
        },
    }


def error_responses(label: str, *codes: int) -> dict[int | str, dict[str, Any]]:
    """OpenAPI ``responses`` entries for the failure statuses an endpoint can return."""
    examples = {
        HTTP_400_BAD_REQUEST: error_example("Invalid ID format", "Bad request"),
        HTTP_404_NOT_FOUND: error_example(f"{label} not found", "Not found"),
        HTTP_409_CONFLICT: error_example(f"{label} already exists", "Duplicate"),
        HTTP_500_INTERNAL_SERVER_ERROR: error_example(
            f"Error fetching {label.lower()}",
            "Storage failure",
        ),
    }
    return {code: examples[code] for code in codes}


def upload_error_responses(label: str, *codes: int) -> dict[int | str, dict[str, Any]]:
    """Like :func:`error_responses`, plus the upload validation failures."""
    return {
        **error_responses(label, *codes),
        HTTP_413_REQUEST_ENTITY_TOO_LARGE: error_example(
            "Your image is too large. Please use an image smaller than 5MB.",
            "File too large",
        ),
        HTTP_415_UNSUPPORTED_MEDIA_TYPE: error_example(
            "This image format isn't supported. Please use one of: JPEG, PNG, WEBP, GIF.",
            "Unsupported type",
        ),
    }


RecordId = Annotated[str, Path(description="Record ID (UUID)")]


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    service_dependency: Callable[..., ContentService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    label: str,
    plural: str,
) -> APIRouter:
    """
    Build the list/create/read/update/delete router for one resource.

    Parameters
    ----------
    prefix : str
        Mount path, e.g. ``"/categories"``.
    tag : str
        OpenAPI tag.
    service_dependency : Callable
        FastAPI dependency returning the resource's gateway.
    create_schema, update_schema : type[BaseModel]
        Request bodies for POST and PUT/PATCH.
    response_schema : type[BaseModel]
        Shape of one record in responses.
    label, plural : str
        Entity names used in summaries.

    Returns
    -------
    APIRouter
        Router with the six endpoints registered.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    name = prefix.strip("/").replace("-", "_")
    ServiceDep = Annotated[ContentService, Depends(service_dependency)]

    @router.get(
        "",
        response_class=ORJSONResponse,
        response_model=ApiResponse[Paginated[response_schema]],
        summary=f"List {plural.lower()}",
        description=f"{plural} newest first, paginated with `page` and `limit`.",
        responses=error_responses(label, HTTP_500_INTERNAL_SERVER_ERROR),
        operation_id=f"{name}_list",
    )
    async def list_records(service: ServiceDep, pagination: PaginationDep) -> ORJSONResponse:
        result = await service.get_page(pagination.page, pagination.limit)
        return to_response(result, response_schema)

    @router.post(
        "",
        response_class=ORJSONResponse,
        response_model=ApiResponse[response_schema],
        status_code=HTTP_201_CREATED,
        summary=f"Create a {label.lower()}",
        description=f"Create a {label.lower()}. The slug is generated by the server.",
        responses=error_responses(label, HTTP_400_BAD_REQUEST, HTTP_409_CONFLICT),
        operation_id=f"{name}_create",
    )
    async def create_record(
        payload: Annotated[create_schema, Body()],
        service: ServiceDep,
    ) -> ORJSONResponse:
        return to_response(await service.create(payload), response_schema)

    @router.get(
        "/{record_id}",
        response_class=ORJSONResponse,
        response_model=ApiResponse[response_schema],
        summary=f"Get a {label.lower()} by ID",
        responses=error_responses(label, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
        operation_id=f"{name}_get",
    )
    async def get_record(record_id: RecordId, service: ServiceDep) -> ORJSONResponse:
        return to_response(await service.get_by_id(record_id), response_schema)

    @router.put(
        "/{record_id}",
        response_class=ORJSONResponse,
        response_model=ApiResponse[response_schema],
        summary=f"Update a {label.lower()}",
        description="Merge the supplied fields into the stored record. The slug never changes.",
        responses=error_responses(
            label,
            HTTP_400_BAD_REQUEST,
            HTTP_404_NOT_FOUND,
            HTTP_409_CONFLICT,
        ),
        operation_id=f"{name}_update",
    )
    async def update_record(
        record_id: RecordId,
        service: ServiceDep,
        payload: Annotated[update_schema | None, Body()] = None,
    ) -> ORJSONResponse:
        return to_response(await service.update(record_id, payload), response_schema)

    @router.patch(
        "/{record_id}",
        response_class=ORJSONResponse,
        response_model=ApiResponse[response_schema],
        summary=f"Partially update a {label.lower()}",
        description="Change only the supplied fields; an empty body is rejected.",
        responses=error_responses(
            label,
            HTTP_400_BAD_REQUEST,
            HTTP_404_NOT_FOUND,
            HTTP_409_CONFLICT,
        ),
        operation_id=f"{name}_patch",
    )
    async def patch_record(
        record_id: RecordId,
        service: ServiceDep,
        payload: Annotated[update_schema | None, Body()] = None,
    ) -> ORJSONResponse:
        return to_response(await service.patch(record_id, payload), response_schema)

    @router.delete(
        "/{record_id}",
        response_class=ORJSONResponse,
        response_model=ApiResponse[response_schema],
        summary=f"Delete a {label.lower()}",
        responses=error_responses(label, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
        operation_id=f"{name}_delete",
    )
    async def delete_record(record_id: RecordId, service: ServiceDep) -> ORJSONResponse:
        return to_response(await service.delete(record_id), response_schema)

    return router
