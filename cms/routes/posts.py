"""
Post routes.

Besides the standard CRUD endpoints, posts accept a featured image upload
and own the comment thread endpoints that need a post id.
"""

from typing import Annotated

from fastapi import Body, File, UploadFile
from fastapi.responses import ORJSONResponse
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
)

from cms.dependencies import CommentServiceDep, PostServiceDep
from cms.dependencies.dependencies import get_post_service
from cms.routes.crud import (
    RecordId,
    build_crud_router,
    error_responses,
    upload_error_responses,
)
from cms.schemas import (
    ApiResponse,
    CommentCreate,
    CommentResponse,
    CommentThreadResponse,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from cms.utils.responses import to_response

router = build_crud_router(
    prefix="/posts",
    tag="📝 Posts",
    service_dependency=get_post_service,
    create_schema=PostCreate,
    update_schema=PostUpdate,
    response_schema=PostResponse,
    label="Post",
    plural="Posts",
)


@router.post(
    "/{record_id}/upload-image",
    response_class=ORJSONResponse,
    response_model=ApiResponse[PostResponse],
    summary="Upload a post's featured image",
    description="Multipart upload in the `image` field; sets the post's `image` path.",
    responses=upload_error_responses("Post", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="posts_upload_image",
)
async def upload_post_image(
    record_id: RecordId,
    service: PostServiceDep,
    image: Annotated[UploadFile | None, File(description="Image file")] = None,
) -> ORJSONResponse:
    """
    Store an image and attach it to a post.

    Parameters
    ----------
    record_id : str
        Post identifier.
    service : PostService
        Post gateway dependency.
    image : UploadFile | None
        The uploaded file.

    Returns
    -------
    ORJSONResponse
        The updated post in the standard envelope.
    """
    return to_response(await service.upload_image(record_id, image), PostResponse)


@router.post(
    "/{record_id}/comments",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentResponse],
    status_code=HTTP_201_CREATED,
    summary="Comment on a post",
    description="Add a comment, or a reply when `parent` names a comment of the same post.",
    responses=error_responses("Post", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="posts_add_comment",
)
async def add_comment(
    record_id: RecordId,
    payload: Annotated[
        CommentCreate,
        Body(
            openapi_examples={
                "comment": {"summary": "Top-level comment", "value": {"author": "Sam", "content": "Nice!"}},
                "reply": {
                    "summary": "Reply",
                    "value": {
                        "author": "Ana",
                        "content": "Agreed",
                        "parent": "123e4567-e89b-12d3-a456-426614174000",
                    },
                },
            },
        ),
    ],
    service: CommentServiceDep,
) -> ORJSONResponse:
    """
    Add a comment or reply to a post.

    Parameters
    ----------
    record_id : str
        Post identifier.
    payload : CommentCreate
        Author, content and optional parent comment id.
    service : CommentService
        Comment gateway dependency.

    Returns
    -------
    ORJSONResponse
        The created comment (201).
    """
    return to_response(await service.add_comment(record_id, payload), CommentResponse)


@router.get(
    "/{record_id}/comments",
    response_class=ORJSONResponse,
    response_model=ApiResponse[list[CommentThreadResponse]],
    summary="List a post's comments",
    description="Comments in insertion order, each with its direct replies expanded.",
    responses=error_responses("Post", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND),
    operation_id="posts_list_comments",
)
async def get_post_comments(record_id: RecordId, service: CommentServiceDep) -> ORJSONResponse:
    return to_response(await service.get_comments_by_post(record_id), CommentThreadResponse)
