from cms.configs.logger import file_logger
from cms.configs.settings import (
    DEFAULT_ERROR_MESSAGE,
    INVALID_ID_MESSAGE,
    Settings,
    settings,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "INVALID_ID_MESSAGE",
    "Settings",
    "file_logger",
    "settings",
]
