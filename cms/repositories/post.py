"""Post repository for database operations."""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import func, select

from cms.models.post import PostDB
from cms.models.taxonomy import TagDB
from cms.repositories.base import BaseRepository


class PostRepository(BaseRepository[PostDB]):
    """
    Repository for Post database operations.

    The ``tags`` and ``comments`` columns hold JSON lists, so every change
    assigns a new list instead of mutating the loaded one in place.
    """

    model = PostDB
    label = "Post"

    async def count_tags(self, tag_ids: Iterable[UUID]) -> int:
        """
        Count how many of ``tag_ids`` exist.

        Args:
            tag_ids: Tag UUIDs, duplicates ignored

        Returns:
            int: Number of distinct ids that match a stored tag
        """
        ids = set(tag_ids)
        if not ids:
            return 0
        statement = select(func.count()).select_from(TagDB).where(TagDB.id.in_(ids))
        result = await self.session.execute(statement)
        return result.scalar() or 0

    async def append_comment(self, post: PostDB, comment_id: UUID) -> PostDB:
        post.comments = [*post.comments, str(comment_id)]
        return await self._add_and_refresh(post)

    async def remove_comments(self, post: PostDB, comment_ids: Iterable[UUID]) -> PostDB:
        removed = {str(cid) for cid in comment_ids}
        post.comments = [cid for cid in post.comments if cid not in removed]
        return await self._add_and_refresh(post)
