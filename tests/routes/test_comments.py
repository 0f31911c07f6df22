# tests/routes/test_comments.py
"""HTTP tests for post comments and /api/comments."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


@pytest.fixture
async def post_id(client: AsyncClient) -> str:
    response = await client.post(
        "/api/posts",
        json={"title": "Threaded", "content": "Body", "author": "Jane"},
    )
    return response.json()["data"]["id"]


async def _comment(client: AsyncClient, post_id: str, **fields: object) -> dict:
    payload = {"author": "Sam", "content": "Nice!", **fields}
    response = await client.post(f"/api/posts/{post_id}/comments", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCommentRoutes:
    @pytest.mark.asyncio
    async def test_add_root_comment(self, client: AsyncClient, post_id: str) -> None:
        comment = await _comment(client, post_id)

        post = (await client.get(f"/api/posts/{post_id}")).json()["data"]
        assert comment["post"] == post_id
        assert comment["parent"] is None
        assert comment["likes"] == 0
        assert post["comments"] == [comment["id"]]

    @pytest.mark.asyncio
    async def test_add_reply(self, client: AsyncClient, post_id: str) -> None:
        root = await _comment(client, post_id)

        reply = await _comment(client, post_id, author="Ana", content="Agreed", parent=root["id"])

        fetched = (await client.get(f"/api/comments/{root['id']}")).json()["data"]
        post = (await client.get(f"/api/posts/{post_id}")).json()["data"]
        assert reply["parent"] == root["id"]
        assert [r["id"] for r in fetched["replies"]] == [reply["id"]]
        assert post["comments"] == [root["id"], reply["id"]]

    @pytest.mark.asyncio
    async def test_add_to_unknown_post(self, client: AsyncClient) -> None:
        response = await client.post(
            f"/api/posts/{uuid4()}/comments",
            json={"author": "Sam", "content": "Nice!"},
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"

    @pytest.mark.asyncio
    async def test_add_with_unknown_parent(self, client: AsyncClient, post_id: str) -> None:
        response = await client.post(
            f"/api/posts/{post_id}/comments",
            json={"author": "Sam", "content": "Nice!", "parent": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Parent comment not found"

    @pytest.mark.asyncio
    async def test_add_without_content(self, client: AsyncClient, post_id: str) -> None:
        response = await client.post(f"/api/posts/{post_id}/comments", json={"author": "Sam"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_thread(self, client: AsyncClient, post_id: str) -> None:
        root = await _comment(client, post_id)
        reply = await _comment(client, post_id, parent=root["id"])

        response = await client.get(f"/api/posts/{post_id}/comments")

        thread = response.json()["data"]
        assert response.status_code == 200
        assert [c["id"] for c in thread] == [root["id"], reply["id"]]
        assert thread[0]["replies"][0]["id"] == reply["id"]
        assert thread[0]["replies"][0]["post"] == post_id

    @pytest.mark.asyncio
    async def test_like_twice(self, client: AsyncClient, post_id: str) -> None:
        comment = await _comment(client, post_id)

        first = await client.post(f"/api/comments/{comment['id']}/like")
        second = await client.post(f"/api/comments/{comment['id']}/like")

        assert first.json()["data"]["likes"] == 1
        assert second.json()["data"]["likes"] == 2
        assert second.json()["message"] == "Comment liked successfully"

    @pytest.mark.asyncio
    async def test_like_unknown_comment(self, client: AsyncClient) -> None:
        response = await client.post(f"/api/comments/{uuid4()}/like")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_reply(self, client: AsyncClient, post_id: str) -> None:
        root = await _comment(client, post_id)
        reply = await _comment(client, post_id, parent=root["id"])

        response = await client.delete(f"/api/comments/{reply['id']}")

        parent = (await client.get(f"/api/comments/{root['id']}")).json()["data"]
        post = (await client.get(f"/api/posts/{post_id}")).json()["data"]
        assert response.status_code == 200
        assert response.json()["data"]["id"] == reply["id"]
        assert (await client.get(f"/api/comments/{reply['id']}")).status_code == 404
        assert parent["replies"] == []
        assert post["comments"] == [root["id"]]

    @pytest.mark.asyncio
    async def test_delete_root_removes_thread(self, client: AsyncClient, post_id: str) -> None:
        root = await _comment(client, post_id)
        reply = await _comment(client, post_id, parent=root["id"])

        await client.delete(f"/api/comments/{root['id']}")

        thread = (await client.get(f"/api/posts/{post_id}/comments")).json()["data"]
        assert thread == []
        assert (await client.get(f"/api/comments/{reply['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/comments/xyz")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID format"
