"""Comment routes addressed by comment id."""

from typing import Annotated

from fastapi import APIRouter, Path
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from cms.dependencies import CommentServiceDep
from cms.routes.crud import error_responses
from cms.schemas import ApiResponse, CommentResponse, CommentThreadResponse
from cms.utils.responses import to_response

router = APIRouter(prefix="/comments", tags=["💬 Comments"])

CommentId = Annotated[str, Path(description="Comment ID (UUID)")]
NOT_FOUND = error_responses("Comment", HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND)


@router.get(
    "/{comment_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentThreadResponse],
    summary="Get a comment with its replies",
    responses=NOT_FOUND,
    operation_id="comments_get",
)
async def get_comment(comment_id: CommentId, service: CommentServiceDep) -> ORJSONResponse:
    return to_response(await service.get_comment_by_id(comment_id), CommentThreadResponse)


@router.post(
    "/{comment_id}/like",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentResponse],
    summary="Like a comment",
    description="Atomically adds one to the comment's like counter.",
    responses=NOT_FOUND,
    operation_id="comments_like",
)
async def like_comment(comment_id: CommentId, service: CommentServiceDep) -> ORJSONResponse:
    return to_response(await service.like_comment(comment_id), CommentResponse)


@router.delete(
    "/{comment_id}",
    response_class=ORJSONResponse,
    response_model=ApiResponse[CommentResponse],
    summary="Delete a comment",
    description="Deletes the comment and all replies beneath it, and unlinks it from its parent and post.",
    responses=NOT_FOUND,
    operation_id="comments_delete",
)
async def delete_comment(comment_id: CommentId, service: CommentServiceDep) -> ORJSONResponse:
    """
    Delete a comment thread.

    Parameters
    ----------
    comment_id : str
        Comment identifier.
    service : CommentService
        Comment gateway dependency.

    Returns
    -------
    ORJSONResponse
        Snapshot of the deleted comment.
    """
    return to_response(await service.delete_comment(comment_id), CommentResponse)
