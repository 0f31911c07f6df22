"""Comment repository for database operations."""

from uuid import UUID

from sqlalchemy import select, update

from cms.models.comment import CommentDB
from cms.repositories.base import BaseRepository


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for Comment database operations."""

    model = CommentDB
    label = "Comment"

    async def increment_likes(self, comment_id: UUID) -> CommentDB | None:
        """
        Atomically add one like at the storage level.

        Args:
            comment_id: Comment UUID

        Returns:
            CommentDB | None: The updated comment, or None if it does not exist
        """
        statement = (
            update(CommentDB)
            .where(CommentDB.id == comment_id)
            .values(likes=CommentDB.likes + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        if not result.rowcount:
            return None

        refreshed = await self.session.execute(
            select(CommentDB)
            .where(CommentDB.id == comment_id)
            .execution_options(populate_existing=True),
        )
        return refreshed.scalar_one_or_none()

    async def append_reply(self, parent: CommentDB, reply_id: UUID) -> CommentDB:
        parent.replies = [*parent.replies, str(reply_id)]
        return await self._add_and_refresh(parent)

    async def remove_reply(self, parent: CommentDB, reply_id: UUID) -> CommentDB:
        parent.replies = [rid for rid in parent.replies if rid != str(reply_id)]
        return await self._add_and_refresh(parent)

    async def collect_subtree(self, root: CommentDB) -> list[UUID]:
        """
        Walk ``replies`` breadth first, starting at ``root``.

        Args:
            root: Comment whose thread is collected

        Returns:
            list[UUID]: ``root.id`` followed by every descendant id that exists
        """
        collected = [root.id]
        seen = {root.id}
        frontier = list(root.replies)
        while frontier:
            children = await self.get_many(frontier)
            frontier = []
            for child in children.values():
                if child.id in seen:
                    continue
                seen.add(child.id)
                collected.append(child.id)
                frontier.extend(child.replies)
        return collected
