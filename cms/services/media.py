"""
Media upload service.

This module validates uploaded images and stores them through a storage
backend, and exposes the Media gateway that keeps their metadata.
"""

from io import BytesIO
from uuid import uuid4

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from cms.configs.settings import FILENAME_MAX_LENGTH, settings
from cms.decorators import guarded
from cms.errors import (
    ImageTooLargeError,
    InvalidImageError,
    NoFileUploadedError,
    UnsupportedImageTypeError,
)
from cms.models.media import MediaDB
from cms.monitoring import get_logger
from cms.repositories.media import MediaRepository
from cms.schemas.common import CamelModel
from cms.schemas.media import MediaUpdate
from cms.services.content import ContentService
from cms.services.storage import StorageService, get_storage_service
from cms.utils.results import ServiceResult

logger = get_logger(__name__)


class StoredImage(CamelModel):
    """Metadata of an image after it has been written to storage."""

    filename: str = Field(min_length=1, max_length=FILENAME_MAX_LENGTH)
    filepath: str = Field(min_length=1)
    mimetype: str = Field(min_length=1)
    size: int = Field(ge=0)


class ImageUploader:
    """
    Validates uploaded images and writes them to storage.

    Checks, in order: a file is present, its content type is allowed, it is
    within the size limit, and Pillow can parse it.
    """

    def __init__(self, storage: StorageService | None = None, folder: str = "images") -> None:
        """
        Initialize the uploader.

        Args:
            storage: Optional storage service instance. If not provided,
                    the default storage service will be used.
            folder: Sub-folder of the uploads area the files go to.
        """
        self.storage = storage or get_storage_service()
        self.folder = folder
        self.image_max_size_bytes = settings.MEDIA_IMAGE_MAX_SIZE_MB * 1024 * 1024
        self.image_allowed_types = settings.MEDIA_IMAGE_ALLOWED_TYPES

    def _validate_image_type(self, content_type: str | None) -> None:
        if not content_type or content_type not in self.image_allowed_types:
            raise UnsupportedImageTypeError(
                content_type=content_type or "unknown",
                allowed_types=self.image_allowed_types,
            )

    def _validate_image_size(self, file_data: bytes) -> None:
        actual_size = len(file_data)
        if actual_size > self.image_max_size_bytes:
            raise ImageTooLargeError(
                max_size_mb=settings.MEDIA_IMAGE_MAX_SIZE_MB,
                actual_size_mb=actual_size / (1024 * 1024),
            )

    def _validate_image_content(self, file_data: bytes) -> None:
        """Validate that the bytes decode as an image."""
        if not file_data:
            raise InvalidImageError("The uploaded file is empty.")
        try:
            with Image.open(BytesIO(file_data)) as img:
                img.verify()
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise InvalidImageError from e

    async def store(self, file: UploadFile | None) -> StoredImage:
        """
        Validate and store an uploaded image.

        Args:
            file: The multipart ``image`` field, None when absent.

        Returns:
            StoredImage: Original filename, stored path, type and size.

        Raises:
            NoFileUploadedError: If no file was sent.
            UnsupportedImageTypeError: If the content type is not allowed.
            ImageTooLargeError: If the file exceeds the size limit.
            InvalidImageError: If the bytes are not a readable image.
        """
        if file is None or not file.filename:
            raise NoFileUploadedError

        self._validate_image_type(file.content_type)
        file_data = await file.read()
        self._validate_image_size(file_data)
        self._validate_image_content(file_data)

        content_type = file.content_type or "application/octet-stream"
        path = await self.storage.save(
            folder=self.folder,
            file_id=str(uuid4()),
            file_data=file_data,
            content_type=content_type,
        )
        logger.info("Image stored", path=path, size=len(file_data))
        return StoredImage(
            filename=file.filename,
            filepath=path,
            mimetype=content_type,
            size=len(file_data),
        )

    async def discard(self, path: str) -> None:
        """Remove a stored file, logging instead of failing when it is gone."""
        if not await self.storage.delete(path):
            logger.warning("Stored file already missing", path=path)


class MediaService(ContentService[MediaDB, StoredImage, MediaUpdate]):
    """
    Gateway for uploaded media.

    Records are created only through :meth:`upload`; the slug comes from the
    original filename, and renaming later changes metadata only.
    """

    repository_class = MediaRepository
    create_schema = StoredImage
    update_schema = MediaUpdate
    label = "Media"
    plural = "Media"
    unique_field = None
    slug_field = "filename"

    def __init__(self, session: AsyncSession, storage: StorageService | None = None) -> None:
        super().__init__(session)
        self.uploader = ImageUploader(storage)

    @guarded("uploading")
    async def upload(self, file: UploadFile | None) -> ServiceResult[MediaDB]:
        """
        Validate, store and register an uploaded image.

        Args:
            file: The multipart ``image`` field.

        Returns:
            ServiceResult[MediaDB]: The Media record (201) or the failure.
        """
        stored = await self.uploader.store(file)
        result = await self.create(stored)
        if not result.success:
            # Keep storage in step with the database
            await self.uploader.discard(stored.filepath)
            return result
        return ServiceResult.created(result.data, "Media uploaded successfully")

    async def _after_delete(self, record: MediaDB) -> None:
        await self.uploader.discard(record.filepath)
