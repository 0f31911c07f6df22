# tests/services/test_comment_service.py
"""Tests for comment threading."""

from uuid import UUID, uuid4

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from cms.models import PostDB
from cms.services import CommentService, PostService


@pytest.fixture
def comments(session: AsyncSession) -> CommentService:
    return CommentService(session)


@pytest.fixture
async def post(session: AsyncSession) -> PostDB:
    result = await PostService(session).create(
        {"title": "Threaded", "content": "Body", "author": "Jane"},
    )
    return result.data


async def _reload_post(session: AsyncSession, post_id: UUID) -> PostDB:
    return (await PostService(session).get_by_id(post_id)).data


class TestAddComment:
    @pytest.mark.asyncio
    async def test_root_comment_is_appended_once(
        self,
        session: AsyncSession,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        result = await comments.add_comment(post.id, {"author": "Sam", "content": "Nice!"})

        comment = result.data
        assert result.status_code == 201
        assert result.message == "Comment added successfully"
        assert comment.post_id == post.id
        assert comment.parent_id is None
        assert comment.replies == []
        assert comment.likes == 0
        assert (await _reload_post(session, post.id)).comments == [str(comment.id)]

    @pytest.mark.asyncio
    async def test_reply_is_linked_to_parent_and_post(
        self,
        session: AsyncSession,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        root = (await comments.add_comment(post.id, {"author": "Sam", "content": "Nice!"})).data

        reply = (
            await comments.add_comment(post.id, {"author": "Ana", "content": "Agreed", "parent": root.id})
        ).data

        parent = (await comments.get_comment_by_id(root.id)).data
        assert reply.parent_id == root.id
        assert [r["id"] for r in parent["replies"]] == [reply.id]
        assert (await _reload_post(session, post.id)).comments == [str(root.id), str(reply.id)]

    @pytest.mark.asyncio
    async def test_unknown_post(self, comments: CommentService) -> None:
        result = await comments.add_comment(uuid4(), {"author": "Sam", "content": "Nice!"})

        assert result.status_code == 404
        assert result.message == "Post not found"

    @pytest.mark.asyncio
    async def test_unknown_parent(self, comments: CommentService, post: PostDB) -> None:
        result = await comments.add_comment(
            post.id,
            {"author": "Sam", "content": "Nice!", "parent": str(uuid4())},
        )

        assert result.status_code == 404
        assert result.message == "Parent comment not found"

    @pytest.mark.asyncio
    async def test_parent_from_another_post(
        self,
        session: AsyncSession,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        other = (
            await PostService(session).create({"title": "Other", "content": "Body", "author": "Jane"})
        ).data
        foreign = (await comments.add_comment(other.id, {"author": "Sam", "content": "Hi"})).data

        result = await comments.add_comment(
            post.id,
            {"author": "Ana", "content": "Reply", "parent": foreign.id},
        )

        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_blank_content(self, comments: CommentService, post: PostDB) -> None:
        result = await comments.add_comment(post.id, {"author": "Sam", "content": "  "})
        assert result.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_author(self, comments: CommentService, post: PostDB) -> None:
        result = await comments.add_comment(post.id, {"content": "Nice!"})

        assert result.status_code == 400
        assert result.message == "author is required"


class TestReadComments:
    @pytest.mark.asyncio
    async def test_post_comments_in_insertion_order_with_replies(
        self,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        first = (await comments.add_comment(post.id, {"author": "A", "content": "one"})).data
        second = (await comments.add_comment(post.id, {"author": "B", "content": "two"})).data
        reply = (
            await comments.add_comment(post.id, {"author": "C", "content": "three", "parent": first.id})
        ).data

        result = await comments.get_comments_by_post(post.id)

        thread = result.data
        assert [c["id"] for c in thread] == [first.id, second.id, reply.id]
        assert [r["id"] for r in thread[0]["replies"]] == [reply.id]
        assert thread[1]["replies"] == []

    @pytest.mark.asyncio
    async def test_post_without_comments(self, comments: CommentService, post: PostDB) -> None:
        result = await comments.get_comments_by_post(post.id)
        assert result.data == []

    @pytest.mark.asyncio
    async def test_unknown_comment(self, comments: CommentService) -> None:
        result = await comments.get_comment_by_id(uuid4())

        assert result.status_code == 404
        assert result.message == "Comment not found"

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, comments: CommentService) -> None:
        result = await comments.get_comment_by_id("bad-id")
        assert result.status_code == 400


class TestLikeComment:
    @pytest.mark.asyncio
    async def test_two_likes(self, comments: CommentService, post: PostDB) -> None:
        comment = (await comments.add_comment(post.id, {"author": "Sam", "content": "Nice!"})).data

        first = await comments.like_comment(comment.id)
        assert first.data.likes == 1

        second = await comments.like_comment(comment.id)
        assert second.data.likes == 2
        assert second.message == "Comment liked successfully"

    @pytest.mark.asyncio
    async def test_unknown_comment(self, comments: CommentService) -> None:
        result = await comments.like_comment(uuid4())
        assert result.status_code == 404


class TestDeleteComment:
    @pytest.mark.asyncio
    async def test_delete_reply_unlinks_it(
        self,
        session: AsyncSession,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        root = (await comments.add_comment(post.id, {"author": "A", "content": "root"})).data
        reply = (
            await comments.add_comment(post.id, {"author": "B", "content": "reply", "parent": root.id})
        ).data

        deleted = await comments.delete_comment(reply.id)

        assert deleted.success is True
        assert deleted.data.id == reply.id
        assert (await comments.get_comment_by_id(reply.id)).status_code == 404
        assert (await comments.get_comment_by_id(root.id)).data["replies"] == []
        assert (await _reload_post(session, post.id)).comments == [str(root.id)]

    @pytest.mark.asyncio
    async def test_delete_cascades_to_reply_subtree(
        self,
        session: AsyncSession,
        comments: CommentService,
        post: PostDB,
    ) -> None:
        root = (await comments.add_comment(post.id, {"author": "A", "content": "root"})).data
        child = (
            await comments.add_comment(post.id, {"author": "B", "content": "child", "parent": root.id})
        ).data
        grandchild = (
            await comments.add_comment(post.id, {"author": "C", "content": "deep", "parent": child.id})
        ).data
        survivor = (await comments.add_comment(post.id, {"author": "D", "content": "other"})).data

        result = await comments.delete_comment(root.id)

        assert result.success is True
        for removed in (root, child, grandchild):
            assert (await comments.get_comment_by_id(removed.id)).status_code == 404
        assert (await _reload_post(session, post.id)).comments == [str(survivor.id)]

    @pytest.mark.asyncio
    async def test_unknown_comment(self, comments: CommentService) -> None:
        result = await comments.delete_comment(uuid4())
        assert result.status_code == 404
