"""Media library routes."""

from typing import Annotated

from fastapi import APIRouter, Body, File, UploadFile
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from cms.dependencies import MediaServiceDep, PaginationDep
from cms.routes.crud import RecordId, error_responses, upload_error_responses
from cms.schemas import ApiResponse, MediaResponse, MediaUpdate, Paginated
from cms.utils.responses import to_response

router = APIRouter(prefix="/media", tags=["🖼️ Media"])


@router.post(
    "/upload",
    response_class=ORJSONResponse,
    response_model=ApiResponse[MediaResponse],
    status_code=HTTP_201_CREATED,
    summary="Upload an image",
    description=(
        "Multipart upload in the `image` field. The file is checked against the allowed "
        "types and size limit, verified with Pillow and stored under `uploads/images/`."
    ),
    responses=upload_error_responses("Media", HTTP_400_BAD_REQUEST),
    operation_id="media_upload",
)
async def upload_media(
    service: MediaServiceDep,
    image: Annotated[UploadFile | None, File(description="Image file")] = None,
) -> ORJSONResponse:
    """
    Upload an image to the media library.

    Parameters
    ----------
    service : MediaService
        Media gateway dependency.
    image : UploadFile | None
        The uploaded file.

    Returns
    -------
    ORJSONResponse
        The created Media record (201).
    """
    return to_response(await service.upload(image), MediaResponse)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=ApiResponse[Paginated[MediaResponse]],
    summary="List media",
    responses=error_responses("Media", HTTP_500_INTERNAL_SERVER_ERROR),
    operation_id="media_list",
)
async def list_media(service: MediaServiceDep, pagination: PaginationDep) -> ORJSONResponse:
    return to_response(await service.get_page(pagination.page, pagination.limit), MediaResponse)


@router.get(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[MediaResponse],
    summary="Get media by ID",
    responses=error_responses("Media", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="media_get",
)
async def get_media(record_id: RecordId, service: MediaServiceDep) -> ORJSONResponse:
    return to_response(await service.get_by_id(record_id), MediaResponse)


@router.patch(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[MediaResponse],
    summary="Rename media",
    description="Changes the stored `filename` only; the file and slug stay as they are.",
    responses=error_responses("Media", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="media_patch",
)
async def patch_media(
    record_id: RecordId,
    service: MediaServiceDep,
    payload: Annotated[MediaUpdate | None, Body()] = None,
) -> ORJSONResponse:
    return to_response(await service.patch(record_id, payload), MediaResponse)


@router.delete(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[MediaResponse],
    summary="Delete media",
    description="Removes the stored file, then the record. A file that is already gone is not an error.",
    responses=error_responses("Media", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="media_delete",
)
async def delete_media(record_id: RecordId, service: MediaServiceDep) -> ORJSONResponse:
    return to_response(await service.delete(record_id), MediaResponse)
