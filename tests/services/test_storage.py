# tests/services/test_storage.py
"""Tests for the local filesystem storage backend."""

from pathlib import Path
from unittest.mock import patch

import pytest

from cms.errors import FileStorageError
from cms.services.storage import get_storage_service
from cms.services.storage.local import LocalStorage


class TestLocalStorage:
    @pytest.mark.asyncio
    async def test_save_writes_file_and_returns_public_path(
        self,
        storage: LocalStorage,
        uploads_dir: Path,
    ) -> None:
        path = await storage.save("images", "abc", b"data", "image/png")

        assert path == "uploads/images/abc.png"
        assert (uploads_dir / "images" / "abc.png").read_bytes() == b"data"

    @pytest.mark.asyncio
    async def test_unknown_type_gets_bin_extension(self, storage: LocalStorage) -> None:
        assert (await storage.save("images", "abc", b"data", "image/x-unknown")).endswith(".bin")

    @pytest.mark.asyncio
    async def test_delete(self, storage: LocalStorage, uploads_dir: Path) -> None:
        path = await storage.save("images", "abc", b"data", "image/jpeg")

        assert await storage.delete(path) is True
        assert not (uploads_dir / "images" / "abc.jpg").exists()
        assert await storage.delete(path) is False

    @pytest.mark.asyncio
    async def test_delete_refuses_paths_outside_uploads(self, storage: LocalStorage, tmp_path: Path) -> None:
        outside = tmp_path / "secret.txt"
        outside.write_text("keep me")

        assert await storage.delete("uploads/../secret.txt") is False
        assert outside.exists()

    @pytest.mark.asyncio
    async def test_write_failure(self, storage: LocalStorage) -> None:
        with patch("cms.services.storage.local.aiofiles.open", side_effect=OSError("read-only")):
            with pytest.raises(FileStorageError):
                await storage.save("images", "abc", b"data", "image/png")


def test_default_service_is_local_storage() -> None:
    assert isinstance(get_storage_service(), LocalStorage)
