"""Base repository for database operations."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.errors.database import DatabaseError, DuplicateEntryError, RecordNotFoundError
from cms.models.base import DocumentBase
from cms.utils.helpers import parse_uuid, utcnow

type FilterValue = str | int | float | bool | UUID | datetime | None


class BaseRepository[ModelT: DocumentBase]:
    """
    Base repository implementing common CRUD operations.

    This class provides a generic implementation of database operations
    that can be extended by specific entity repositories. Every write is
    flushed right away; committing is left to the request-scoped session.

    Attributes:
        model: The SQLModel database model type.
        label: Human readable entity name used in error messages.
    """

    model: type[ModelT]
    label: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, data: dict[str, Any]) -> ModelT:
        """
        Create a new record in the database.

        Args:
            data: Column values, already validated by the caller

        Returns:
            ModelT: Created database model
        """
        db_obj = self.model.model_validate(data)
        return await self._add_and_refresh(db_obj)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        statement = select(self.model).where(self.model.id == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            raise RecordNotFoundError(detail=f"{self.label} not found")
        return record

    async def get_many(self, record_ids: Iterable[str | UUID]) -> dict[str, ModelT]:
        """
        Load several records in one query.

        Ids that are malformed or missing are silently absent from the result.

        Returns:
            dict[str, ModelT]: Records keyed by their string id
        """
        ids = {uid for uid in map(parse_uuid, record_ids) if uid is not None}
        if not ids:
            return {}
        statement = select(self.model).where(self.model.id.in_(ids))
        result = await self.session.execute(statement)
        return {str(record.id): record for record in result.scalars().all()}

    async def list_paged(self, skip: int = 0, limit: int = 10) -> list[ModelT]:
        """
        Get records newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            list[ModelT]: List of records
        """
        statement = (
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def update(self, record: ModelT, data: dict[str, Any]) -> ModelT:
        """
        Merge ``data`` into an already loaded record.

        Args:
            record: Record to update
            data: Fields to overwrite; absent keys keep their stored values

        Returns:
            ModelT: Updated record
        """
        for key, value in data.items():
            setattr(record, key, value)
        record.updated_at = utcnow()
        return await self._add_and_refresh(record)

    async def delete(self, record: ModelT) -> ModelT:
        """
        Delete a loaded record.

        Returns:
            ModelT: The removed record, still readable after the flush
        """
        await self.session.delete(record)
        await self.session.flush()
        return record

    async def delete_many(self, record_ids: Iterable[UUID]) -> int:
        """
        Delete records by id in a single statement.

        Returns:
            int: Number of rows removed
        """
        ids = list(record_ids)
        if not ids:
            return 0
        statement = delete(self.model).where(self.model.id.in_(ids))
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0

    async def exists(self, record_id: UUID) -> bool:
        """
        Check if a record exists.

        Args:
            record_id: Record UUID

        Returns:
            bool: True if record exists, False otherwise
        """
        # Existence check without loading the full object
        statement = select(1).where(self.model.id == record_id).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None

    async def slug_exists(self, slug: str) -> bool:
        return await self._check_exists_by_field("slug", slug)

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(
                    detail=f"{self.label} with this name or slug already exists",
                ) from e
            raise DatabaseError(detail=f"Failed to save {self.label.lower()}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(detail=f"Failed to save {self.label.lower()}") from e

    async def _check_exists_by_field(
        self,
        field_name: str,
        value: FilterValue,
        exclude_id: UUID | None = None,
    ) -> bool:
        """
        Check if a record exists with a specific field value.

        Args:
            field_name: Name of the field to check
            value: Value to check for
            exclude_id: Optional ID to exclude from check (for updates)

        Returns:
            bool: True if record exists, False otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(1).where(field == value)

        if exclude_id is not None:
            statement = statement.where(self.model.id != exclude_id)

        statement = statement.limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none() is not None
