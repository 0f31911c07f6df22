"""Media repository for database operations."""

from cms.models.media import MediaDB
from cms.repositories.base import BaseRepository


class MediaRepository(BaseRepository[MediaDB]):
    """Repository for Media database operations."""

    model = MediaDB
    label = "Media"
