from cms.errors.base import BASE_EXCEPTION, BaseAppError, create_exception_handler, error_content
from cms.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from cms.errors.upload import (
    FileStorageError,
    ImageTooLargeError,
    InvalidImageError,
    NoFileUploadedError,
    UnsupportedImageTypeError,
    UploadError,
    upload_exception_handler,
)
from cms.errors.validation import ValidationError, validation_exception_handler

# Alternative names for the same errors
NotFoundError = RecordNotFoundError
DuplicateError = DuplicateEntryError
StorageError = DatabaseError

__all__ = [
    "BASE_EXCEPTION",
    "BaseAppError",
    "create_exception_handler",
    "error_content",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "DuplicateError",
    "RecordNotFoundError",
    "NotFoundError",
    "StorageError",
    "database_exception_handler",
    "FileStorageError",
    "ImageTooLargeError",
    "InvalidImageError",
    "NoFileUploadedError",
    "UnsupportedImageTypeError",
    "UploadError",
    "upload_exception_handler",
    "ValidationError",
    "validation_exception_handler",
]
