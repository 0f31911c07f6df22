# tests/services/test_post_service.py
"""Tests for PostService and PageService."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel.ext.asyncio.session import AsyncSession

from cms.services import CategoryService, PageService, PostService, TagService
from cms.services.storage.local import LocalStorage


@pytest.fixture
def posts(session: AsyncSession, storage: LocalStorage) -> PostService:
    return PostService(session, storage)


def _post(**fields: object) -> dict[str, object]:
    return {"title": "Hello World", "content": "First post.", "author": "Jane", **fields}


def _upload(content_type: str, data: bytes, filename: str = "cover.png") -> MagicMock:
    file = MagicMock()
    file.filename = filename
    file.content_type = content_type
    file.read = AsyncMock(return_value=data)
    return file


class TestCreatePost:
    @pytest.mark.asyncio
    async def test_defaults(self, posts: PostService) -> None:
        result = await posts.create(_post())

        post = result.data
        assert result.status_code == 201
        assert result.message == "Post created successfully"
        assert post.slug == "hello-world"
        assert post.status == "draft"
        assert post.tags == []
        assert post.comments == []
        assert post.likes == 0
        assert post.views == 0
        assert post.is_featured is False
        assert post.published_at is not None

    @pytest.mark.asyncio
    async def test_with_category_and_tags(self, session: AsyncSession, posts: PostService) -> None:
        category = (await CategoryService(session).create({"name": "Tech"})).data
        tag = (await TagService(session).create({"name": "python"})).data

        result = await posts.create(_post(category=category.id, tags=[tag.id, tag.id]))

        assert result.success is True
        assert result.data.category_id == category.id
        assert result.data.tags == [str(tag.id)]

    @pytest.mark.asyncio
    async def test_unknown_category(self, posts: PostService) -> None:
        result = await posts.create(_post(category=uuid4()))

        assert result.status_code == 404
        assert result.message == "Category not found"

    @pytest.mark.asyncio
    async def test_unknown_tag(self, posts: PostService) -> None:
        result = await posts.create(_post(tags=[uuid4()]))

        assert result.status_code == 404
        assert result.message == "One or more tags not found"

    @pytest.mark.asyncio
    async def test_duplicate_title(self, posts: PostService) -> None:
        await posts.create(_post())

        result = await posts.create(_post(content="Another body"))

        assert result.status_code == 409
        assert result.message == "Post already exists"

    @pytest.mark.asyncio
    async def test_invalid_status(self, posts: PostService) -> None:
        result = await posts.create(_post(status="archived"))
        assert result.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_author(self, posts: PostService) -> None:
        result = await posts.create({"title": "Hello", "content": "Body"})

        assert result.status_code == 400
        assert result.message == "author is required"


class TestUpdatePost:
    @pytest.mark.asyncio
    async def test_patch_status(self, posts: PostService) -> None:
        created = await posts.create(_post())

        result = await posts.patch(created.data.id, {"status": "published"})

        assert result.data.status == "published"
        assert result.data.title == "Hello World"

    @pytest.mark.asyncio
    async def test_clear_category_with_null(self, session: AsyncSession, posts: PostService) -> None:
        category = (await CategoryService(session).create({"name": "Tech"})).data
        created = await posts.create(_post(category=category.id))

        result = await posts.patch(created.data.id, {"category": None})

        assert result.success is True
        assert result.data.category_id is None

    @pytest.mark.asyncio
    async def test_null_title_is_ignored(self, posts: PostService) -> None:
        created = await posts.create(_post())

        result = await posts.update(created.data.id, {"title": None, "content": "Edited"})

        assert result.data.title == "Hello World"
        assert result.data.content == "Edited"

    @pytest.mark.asyncio
    async def test_retag_with_unknown_tag(self, posts: PostService) -> None:
        created = await posts.create(_post())

        result = await posts.patch(created.data.id, {"tags": [str(uuid4())]})

        assert result.status_code == 404


class TestUploadImage:
    @pytest.mark.asyncio
    async def test_sets_image_path(self, posts: PostService, valid_png_bytes: bytes) -> None:
        created = await posts.create(_post())

        result = await posts.upload_image(created.data.id, _upload("image/png", valid_png_bytes))

        assert result.success is True
        assert result.message == "Image uploaded successfully"
        assert result.data.image.startswith("uploads/images/")
        assert result.data.image.endswith(".png")

    @pytest.mark.asyncio
    async def test_replacing_image_removes_previous_file(
        self,
        posts: PostService,
        uploads_dir: Path,
        valid_png_bytes: bytes,
    ) -> None:
        created = await posts.create(_post())
        first = await posts.upload_image(created.data.id, _upload("image/png", valid_png_bytes))
        first_path = first.data.image

        second = await posts.upload_image(created.data.id, _upload("image/png", valid_png_bytes))

        assert second.data.image != first_path
        remaining = list((uploads_dir / "images").iterdir())
        assert [f"uploads/images/{p.name}" for p in remaining] == [second.data.image]

    @pytest.mark.asyncio
    async def test_failed_save_discards_new_file(
        self,
        posts: PostService,
        uploads_dir: Path,
        valid_png_bytes: bytes,
    ) -> None:
        created = await posts.create(_post())
        failure = OperationalError("UPDATE", {}, Exception("database is locked"))

        with patch.object(posts.repo, "update", AsyncMock(side_effect=failure)):
            result = await posts.upload_image(created.data.id, _upload("image/png", valid_png_bytes))

        assert result.status_code == 500
        assert result.message == "Error uploading image for post"
        assert not any(uploads_dir.rglob("*.png"))

    @pytest.mark.asyncio
    async def test_unknown_post(self, posts: PostService, valid_png_bytes: bytes) -> None:
        result = await posts.upload_image(uuid4(), _upload("image/png", valid_png_bytes))
        assert result.status_code == 404

    @pytest.mark.asyncio
    async def test_missing_file(self, posts: PostService) -> None:
        created = await posts.create(_post())

        result = await posts.upload_image(created.data.id, None)

        assert result.status_code == 400
        assert result.message == "No file uploaded"


class TestPageService:
    @pytest.mark.asyncio
    async def test_create_get_delete(self, session: AsyncSession) -> None:
        pages = PageService(session)

        created = await pages.create({"title": "About Us", "content": "Who we are"})
        fetched = await pages.get_by_id(created.data.id)
        deleted = await pages.delete(created.data.id)
        missing = await pages.get_by_id(created.data.id)

        assert created.data.slug == "about-us"
        assert fetched.data.title == "About Us"
        assert deleted.success is True
        assert missing.message == "Page not found"

    @pytest.mark.asyncio
    async def test_duplicate_title(self, session: AsyncSession) -> None:
        pages = PageService(session)
        await pages.create({"title": "About Us", "content": "Who we are"})

        result = await pages.create({"title": "About Us", "content": "Again"})

        assert result.status_code == 409
        assert result.message == "Page already exists"
