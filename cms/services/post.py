"""Post service: references to categories and tags, plus the featured image."""

from typing import Any
from uuid import UUID

from fastapi import UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from cms.decorators import guarded
from cms.errors import RecordNotFoundError
from cms.models.post import PostDB
from cms.repositories.post import PostRepository
from cms.repositories.taxonomy import CategoryRepository
from cms.schemas.post import PostCreate, PostUpdate
from cms.services.content import ContentService, parse_id
from cms.services.media import ImageUploader
from cms.services.storage import StorageService
from cms.utils.results import ServiceResult


class PostService(ContentService[PostDB, PostCreate, PostUpdate]):
    """
    Gateway for blog posts.

    ``category`` and ``tags`` in the request become ``category_id`` and the
    ``tags`` id list; every referenced record must exist before the post is
    written.
    """

    repository_class = PostRepository
    create_schema = PostCreate
    update_schema = PostUpdate
    label = "Post"
    plural = "Posts"
    unique_field = "title"
    slug_field = "title"
    nullable_fields = frozenset({"excerpt", "category", "meta_title", "meta_description"})

    repo: PostRepository

    def __init__(self, session: AsyncSession, storage: StorageService | None = None) -> None:
        super().__init__(session)
        self.categories = CategoryRepository(session)
        self.uploader = ImageUploader(storage)

    async def _check_category(self, category_id: UUID | None) -> None:
        if category_id is not None and not await self.categories.exists(category_id):
            raise RecordNotFoundError("Category not found")

    async def _check_tags(self, tag_ids: list[UUID]) -> list[str]:
        """Return the ids as strings, in request order without duplicates."""
        unique = list(dict.fromkeys(tag_ids))
        if await self.repo.count_tags(unique) != len(unique):
            raise RecordNotFoundError("One or more tags not found")
        return [str(tag_id) for tag_id in unique]

    async def _to_columns(self, data: dict[str, Any]) -> dict[str, Any]:
        columns = dict(data)
        if "category" in columns:
            category_id = columns.pop("category")
            await self._check_category(category_id)
            columns["category_id"] = category_id
        if "tags" in columns:
            columns["tags"] = await self._check_tags(columns["tags"])
        if "status" in columns:
            columns["status"] = str(columns["status"])
        return columns

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        columns = await self._to_columns(data)
        if columns.get("published_at") is None:
            columns.pop("published_at", None)
        return columns

    async def _prepare_update(self, record: PostDB, data: dict[str, Any]) -> dict[str, Any]:
        return await self._to_columns(data)

    @guarded("uploading image for")
    async def upload_image(self, record_id: str | UUID, file: UploadFile | None) -> ServiceResult[PostDB]:
        """
        Store an image and set it as the post's ``image``.

        The file the post pointed to before is removed once the new path is
        saved; a failed save removes the new file instead.

        Args:
            record_id: Post ID.
            file: The multipart ``image`` field.

        Returns:
            ServiceResult[PostDB]: The updated post or the failure.
        """
        post = await self.repo.get_or_raise(parse_id(record_id))
        previous = post.image
        stored = await self.uploader.store(file)
        try:
            updated = await self.repo.update(post, {"image": stored.filepath})
        except Exception:
            await self.uploader.discard(stored.filepath)
            raise
        if previous and previous != stored.filepath:
            await self.uploader.discard(previous)
        return ServiceResult.ok(updated, "Image uploaded successfully")
