"""
Comment threading.

Comments reference their post and optional parent by id, and the post and
parent keep ordered id lists (``comments`` and ``replies``). All writes of
one operation go through the request session and commit together.
"""

from logging import getLogger
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from cms.configs import file_logger
from cms.decorators import guarded
from cms.errors import RecordNotFoundError
from cms.models.comment import CommentDB
from cms.repositories.comment import CommentRepository
from cms.repositories.post import PostRepository
from cms.schemas.comment import CommentCreate
from cms.services.content import parse_id, validate_fields
from cms.utils.results import ServiceResult

logger = file_logger(getLogger(__name__))


def with_replies(comment: CommentDB, replies: dict[str, CommentDB]) -> dict[str, Any]:
    """Comment as a dict whose ``replies`` ids are swapped for records."""
    data = comment.model_dump()
    data["replies"] = [replies[rid].model_dump() for rid in comment.replies if rid in replies]
    return data


class CommentService:
    """Creates, reads, likes and deletes comments while keeping id lists in step."""

    label = "Comment"

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.comments = CommentRepository(session)
        self.posts = PostRepository(session)

    async def _expand(self, comments: list[CommentDB]) -> list[dict[str, Any]]:
        reply_ids = [rid for comment in comments for rid in comment.replies]
        replies = await self.comments.get_many(reply_ids)
        return [with_replies(comment, replies) for comment in comments]

    @guarded("adding")
    async def add_comment(self, post_id: str | UUID, fields: Any) -> ServiceResult[CommentDB]:
        """
        Create a comment or a reply on a post.

        The post and, when given, the parent are checked before anything is
        written; the parent must belong to the same post.

        Args:
            post_id: Post ID.
            fields: ``author``, ``content`` and optional ``parent``.

        Returns:
            ServiceResult[CommentDB]: The new comment (201) or the failure.
        """
        post = await self.posts.get_or_raise(parse_id(post_id))
        payload = validate_fields(CommentCreate, fields)

        parent = None
        if payload.parent is not None:
            parent = await self.comments.get_by_id(payload.parent)
            if parent is None or parent.post_id != post.id:
                raise RecordNotFoundError("Parent comment not found")

        comment = await self.comments.create(
            {
                "post_id": post.id,
                "author": payload.author,
                "content": payload.content,
                "parent_id": parent.id if parent else None,
            },
        )
        if parent is not None:
            await self.comments.append_reply(parent, comment.id)
        await self.posts.append_comment(post, comment.id)

        logger.info(f"Comment {comment.id} added to post {post.id}")
        return ServiceResult.created(comment, "Comment added successfully")

    @guarded("fetching")
    async def get_comments_by_post(self, post_id: str | UUID) -> ServiceResult[list[dict[str, Any]]]:
        """
        The post's comments in insertion order, each with its direct replies.

        Ids that no longer resolve to a comment are skipped.
        """
        post = await self.posts.get_or_raise(parse_id(post_id))
        found = await self.comments.get_many(post.comments)
        ordered = [found[cid] for cid in post.comments if cid in found]
        return ServiceResult.ok(await self._expand(ordered), "Comments retrieved successfully")

    @guarded("fetching")
    async def get_comment_by_id(self, comment_id: str | UUID) -> ServiceResult[dict[str, Any]]:
        comment = await self.comments.get_or_raise(parse_id(comment_id))
        (expanded,) = await self._expand([comment])
        return ServiceResult.ok(expanded, "Comment retrieved successfully")

    @guarded("liking")
    async def like_comment(self, comment_id: str | UUID) -> ServiceResult[CommentDB]:
        """Add one like with a single ``UPDATE ... SET likes = likes + 1``."""
        comment = await self.comments.increment_likes(parse_id(comment_id))
        if comment is None:
            raise RecordNotFoundError("Comment not found")
        return ServiceResult.ok(comment, "Comment liked successfully")

    @guarded("deleting")
    async def delete_comment(self, comment_id: str | UUID) -> ServiceResult[CommentDB]:
        """
        Delete a comment together with every reply beneath it.

        The comment's id leaves its parent's ``replies`` and all removed ids
        leave the post's ``comments``. A parent or post that no longer exists
        is skipped.

        Returns:
            ServiceResult[CommentDB]: Snapshot of the deleted comment.
        """
        comment = await self.comments.get_or_raise(parse_id(comment_id))
        removed_ids = await self.comments.collect_subtree(comment)

        if comment.parent_id is not None:
            parent = await self.comments.get_by_id(comment.parent_id)
            if parent is not None:
                await self.comments.remove_reply(parent, comment.id)

        post = await self.posts.get_by_id(comment.post_id)
        if post is not None:
            await self.posts.remove_comments(post, removed_ids)

        snapshot = CommentDB.model_validate(comment.model_dump())
        await self.comments.delete_many(removed_ids)

        logger.info(f"Comment {comment.id} deleted with {len(removed_ids) - 1} replies")
        return ServiceResult.ok(snapshot, "Comment deleted successfully")

