# tests/decorators/test_guard.py
"""Tests for the guarded service decorator."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from cms.decorators import guarded
from cms.errors import DatabaseConnectionError, DuplicateEntryError, FileStorageError
from cms.utils.results import ServiceResult


class FakeService:
    label = "Widget"

    def __init__(self, error: Exception | None = None) -> None:
        self.session = MagicMock()
        self.session.rollback = AsyncMock()
        self.error = error

    @guarded("creating")
    async def create(self) -> ServiceResult[str]:
        if self.error is not None:
            raise self.error
        return ServiceResult.created("widget", "Widget created successfully")


class TestGuarded:
    @pytest.mark.asyncio
    async def test_success_passes_through(self) -> None:
        result = await FakeService().create()

        assert result.success is True
        assert result.data == "widget"

    @pytest.mark.asyncio
    async def test_client_error_keeps_message(self) -> None:
        service = FakeService(DuplicateEntryError("Widget already exists"))

        result = await service.create()

        assert result.status_code == 409
        assert result.message == "Widget already exists"
        service.session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_server_error_is_generic(self) -> None:
        service = FakeService(DatabaseConnectionError())

        result = await service.create()

        assert result.status_code == 500
        assert result.message == "Error creating widget"
        service.session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_is_generic(self) -> None:
        service = FakeService(IntegrityError("INSERT", {}, Exception("constraint failed")))

        result = await service.create()

        assert result.status_code == 500
        assert result.message == "Error creating widget"
        service.session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_os_error_is_generic(self) -> None:
        result = await FakeService(OSError("disk full")).create()
        assert result.message == "Error creating widget"

    @pytest.mark.asyncio
    async def test_upload_failure_status_is_kept(self) -> None:
        result = await FakeService(FileStorageError()).create()
        assert result.status_code == 500
        assert result.success is False

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self) -> None:
        with pytest.raises(KeyError):
            await FakeService(KeyError("x")).create()

    def test_wraps_keeps_name(self) -> None:
        assert FakeService.create.__name__ == "create"
