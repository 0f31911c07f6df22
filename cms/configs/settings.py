"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the CMS backend application.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
CATEGORY_NAME_MIN_LENGTH = 3
CATEGORY_NAME_MAX_LENGTH = 50
TAG_NAME_MIN_LENGTH = 3
TAG_NAME_MAX_LENGTH = 50
PAGE_TITLE_MIN_LENGTH = 3
PAGE_TITLE_MAX_LENGTH = 100
POST_TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 250
FILENAME_MAX_LENGTH = 255
SLUG_MAX_LENGTH = 255
# Room left for the "-<epoch ms>" collision suffix
SLUG_BASE_MAX_LENGTH = 200

# Response constants
DEFAULT_ERROR_MESSAGE = "An unexpected server error occurred."
INVALID_ID_MESSAGE = "Invalid ID format"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "CMS Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/cms.log"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:80"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./cms.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Uploads
    UPLOADS_DIR: Path = Path("uploads")
    MEDIA_IMAGE_MAX_SIZE_MB: int = 5
    MEDIA_IMAGE_ALLOWED_TYPES: list[str] = [
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/gif",
    ]

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
