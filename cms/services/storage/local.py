"""
Local filesystem storage implementation.

Files live under the configured uploads directory and are served by the
``/uploads`` static mount.
"""

from pathlib import Path, PurePosixPath

import aiofiles
import aiofiles.os

from cms.configs.settings import settings
from cms.errors import FileStorageError
from cms.monitoring import get_logger

logger = get_logger(__name__)

PUBLIC_PREFIX = "uploads"

EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


class LocalStorage:
    """
    Local filesystem storage implementation.

    Stores files in the local filesystem under the configured
    uploads directory.
    """

    def __init__(self, uploads_dir: Path | None = None) -> None:
        """
        Initialize local storage.

        Args:
            uploads_dir: Root directory for stored files; defaults to
                ``settings.UPLOADS_DIR``.
        """
        self.uploads_dir = Path(uploads_dir or settings.UPLOADS_DIR)

    def _get_extension(self, content_type: str) -> str:
        return EXTENSIONS.get(content_type, "bin")

    def _resolve(self, path: str) -> Path | None:
        """Map a public path back to a file inside the uploads directory."""
        parts = PurePosixPath(path.lstrip("/")).parts
        if parts and parts[0] == PUBLIC_PREFIX:
            parts = parts[1:]
        if not parts:
            return None
        root = self.uploads_dir.resolve()
        candidate = root.joinpath(*parts).resolve()
        # Refuse anything that escapes the uploads directory
        if not candidate.is_relative_to(root):
            return None
        return candidate

    async def save(
        self,
        folder: str,
        file_id: str,
        file_data: bytes,
        content_type: str,
    ) -> str:
        """
        Write a file to ``<uploads_dir>/<folder>/<file_id>.<ext>``.

        Returns:
            str: Public path, ``uploads/<folder>/<file_id>.<ext>``

        Raises:
            FileStorageError: If the file could not be written.
        """
        extension = self._get_extension(content_type)
        target_dir = self.uploads_dir / folder
        file_path = target_dir / f"{file_id}.{extension}"

        try:
            await aiofiles.os.makedirs(target_dir, exist_ok=True)
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(file_data)
        except OSError as e:
            logger.exception("Failed to write upload", path=str(file_path))
            raise FileStorageError from e

        return f"{PUBLIC_PREFIX}/{folder}/{file_id}.{extension}"

    async def delete(self, path: str) -> bool:
        """
        Remove a stored file.

        Returns:
            bool: True if the file was removed, False if it was already gone
        """
        file_path = self._resolve(path)
        if file_path is None or not await aiofiles.os.path.exists(file_path):
            return False
        await aiofiles.os.remove(file_path)
        return True
