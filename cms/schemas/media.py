"""Media request/response schemas."""

from pydantic import Field

from cms.configs.settings import FILENAME_MAX_LENGTH
from cms.schemas.common import CamelModel, RecordResponse


class MediaUpdate(CamelModel):
    """Metadata that can change after upload."""

    filename: str | None = Field(default=None, min_length=1, max_length=FILENAME_MAX_LENGTH)


class MediaResponse(RecordResponse):
    filename: str
    filepath: str
    mimetype: str
    size: int
    slug: str
