"""
Base storage protocol for file storage operations.

Storage backends persist raw bytes and hand back the public path under
which the file is served (for example ``uploads/images/<id>.png``).
"""

from abc import abstractmethod
from typing import Protocol


class StorageService(Protocol):
    """
    Protocol defining the interface for storage services.

    All storage implementations must implement these methods
    to ensure consistent behavior across different backends.
    """

    @abstractmethod
    async def save(
        self,
        folder: str,
        file_id: str,
        file_data: bytes,
        content_type: str,
    ) -> str:
        """
        Store a file.

        Args:
            folder: Sub-folder of the uploads area (e.g., "images")
            file_id: Unique name of the file without extension
            file_data: Raw file bytes
            content_type: MIME type of the file

        Returns:
            str: Public path of the stored file
        """
        ...

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """
        Delete a stored file.

        Args:
            path: Public path previously returned by :meth:`save`

        Returns:
            bool: True if a file was removed, False if it did not exist
        """
        ...
