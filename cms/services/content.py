"""
Generic persistence gateway shared by every content entity.

A gateway validates input, enforces name/title uniqueness, assigns slugs on
creation and wraps every outcome in a :class:`ServiceResult`.
"""

from logging import getLogger
from typing import Any, ClassVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from cms.configs import INVALID_ID_MESSAGE, file_logger
from cms.decorators import guarded
from cms.errors import DuplicateEntryError, ValidationError
from cms.models.base import DocumentBase
from cms.repositories.base import BaseRepository
from cms.utils.helpers import parse_uuid
from cms.utils.results import PageData, ServiceResult
from cms.utils.slugs import resolve_slug, slugify_text

logger = file_logger(getLogger(__name__))

NO_FIELDS_MESSAGE = "No fields provided to update"


def parse_id(record_id: str | UUID) -> UUID:
    """
    Parse a record identifier.

    Raises:
        ValidationError: If ``record_id`` is not a UUID.
    """
    uid = parse_uuid(record_id)
    if uid is None:
        raise ValidationError(INVALID_ID_MESSAGE)
    return uid


def schema_error(exc: SchemaValidationError) -> ValidationError:
    """Convert a pydantic error into the application's 400 error."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        value = error.get("input")
        if error.get("type") == "missing" or (isinstance(value, str) and not value.strip()):
            message = f"{field} is required"
        else:
            message = f"{field}: {error.get('msg', 'Invalid value')}"
        errors.append({"field": field, "message": message, "type": error.get("type")})
    return ValidationError(errors[0]["message"] if errors else "Invalid input", errors=errors)


def validate_fields[SchemaT: BaseModel](schema: type[SchemaT], fields: Any) -> SchemaT:
    """Run ``fields`` (a dict or an already built schema) through ``schema``."""
    if isinstance(fields, BaseModel):
        fields = fields.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(fields or {})
    except SchemaValidationError as e:
        raise schema_error(e) from e


class ContentService[ModelT: DocumentBase, CreateT: BaseModel, UpdateT: BaseModel]:
    """
    CRUD gateway parametrized over a model and its create/update schemas.

    Subclasses set the class attributes and may override the ``_prepare_*``
    hooks to translate request fields into columns or to check references.

    Attributes:
        repository_class: Repository bound to the model.
        create_schema: Schema every create passes through.
        update_schema: Schema for PUT and PATCH bodies.
        label: Singular entity name used in messages.
        plural: Plural entity name used in listing messages.
        unique_field: Field that must be unique after trimming. None disables
            the check.
        slug_field: Field the slug is derived from on creation. None means
            the entity has no slug.
        nullable_fields: Fields an update may explicitly set to null.
    """

    repository_class: ClassVar[type[BaseRepository]]
    create_schema: type[CreateT]
    update_schema: type[UpdateT]
    label: str = "Record"
    plural: str = "Records"
    unique_field: str | None = "name"
    slug_field: str | None = "name"
    nullable_fields: frozenset[str] = frozenset()

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo: BaseRepository[ModelT] = self.repository_class(session)

    # --- Hooks -----------------------------------------------------------

    async def _prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        """Return the columns for a new record. Runs before any write."""
        return data

    async def _prepare_update(self, record: ModelT, data: dict[str, Any]) -> dict[str, Any]:
        """Return the columns to merge into ``record``. Runs before any write."""
        return data

    async def _after_delete(self, record: ModelT) -> None:
        """Side effects to run once the removal has been flushed."""

    # --- Helpers ---------------------------------------------------------

    async def _ensure_unique(self, value: str, exclude_id: UUID | None = None) -> None:
        if self.unique_field is None:
            return
        if await self.repo._check_exists_by_field(self.unique_field, value, exclude_id):
            raise DuplicateEntryError(f"{self.label} already exists")

    async def _new_slug(self, source: str) -> str:
        return await resolve_slug(slugify_text(source), self.repo.slug_exists)

    async def _merge(self, record_id: str | UUID, fields: Any, *, partial: bool) -> ServiceResult[ModelT]:
        uid = parse_id(record_id)
        data = validate_fields(self.update_schema, fields).model_dump(exclude_unset=True)
        data = {k: v for k, v in data.items() if v is not None or k in self.nullable_fields}
        if partial and not data:
            raise ValidationError(NO_FIELDS_MESSAGE)

        record = await self.repo.get_or_raise(uid)

        if self.unique_field and self.unique_field in data:
            if data[self.unique_field] != getattr(record, self.unique_field):
                await self._ensure_unique(data[self.unique_field], exclude_id=record.id)

        columns = await self._prepare_update(record, data)
        updated = await self.repo.update(record, columns)
        logger.info(f"{self.label} {updated.id} updated")
        return ServiceResult.ok(updated, f"{self.label} updated successfully")

    # --- Operations ------------------------------------------------------

    @guarded("creating")
    async def create(self, fields: Any) -> ServiceResult[ModelT]:
        """
        Validate, check uniqueness, assign a slug and persist a new record.

        Args:
            fields: Request fields as a dict or create schema instance.

        Returns:
            ServiceResult[ModelT]: The stored record (201) or the failure.
        """
        data = validate_fields(self.create_schema, fields).model_dump()

        if self.unique_field:
            await self._ensure_unique(data[self.unique_field])

        columns = await self._prepare_create(data)
        if self.slug_field:
            columns["slug"] = await self._new_slug(data[self.slug_field])

        record = await self.repo.create(columns)
        logger.info(f"{self.label} {record.id} created")
        return ServiceResult.created(record, f"{self.label} created successfully")

    @guarded("fetching")
    async def get_by_id(self, record_id: str | UUID) -> ServiceResult[ModelT]:
        record = await self.repo.get_or_raise(parse_id(record_id))
        return ServiceResult.ok(record, f"{self.label} retrieved successfully")

    @guarded("fetching")
    async def list_paged(self, skip: int = 0, limit: int = 10) -> ServiceResult[list[ModelT]]:
        """Records newest first, bounded by ``skip`` and ``limit``."""
        if skip < 0 or limit < 1:
            raise ValidationError("skip must be >= 0 and limit >= 1")
        records = await self.repo.list_paged(skip=skip, limit=limit)
        return ServiceResult.ok(records, f"{self.plural} retrieved successfully")

    @guarded("counting")
    async def count(self) -> ServiceResult[int]:
        return ServiceResult.ok(await self.repo.count(), f"{self.plural} counted successfully")

    @guarded("fetching")
    async def get_page(self, page: int = 1, limit: int = 10) -> ServiceResult[PageData[ModelT]]:
        """
        One page of the listing plus the collection size.

        Args:
            page: 1-based page number.
            limit: Page size.

        Returns:
            ServiceResult[PageData[ModelT]]: Items, total, page, limit.
        """
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive integers")
        items = await self.repo.list_paged(skip=(page - 1) * limit, limit=limit)
        total = await self.repo.count()
        data = PageData(items=items, total=total, page=page, limit=limit)
        return ServiceResult.ok(data, f"{self.plural} retrieved successfully")

    @guarded("updating")
    async def update(self, record_id: str | UUID, fields: Any) -> ServiceResult[ModelT]:
        """Full update (PUT): merge the supplied fields; an empty body is accepted."""
        return await self._merge(record_id, fields, partial=False)

    @guarded("updating")
    async def patch(self, record_id: str | UUID, fields: Any) -> ServiceResult[ModelT]:
        """Partial update (PATCH): merge the supplied fields; an empty body is a 400."""
        return await self._merge(record_id, fields, partial=True)

    @guarded("deleting")
    async def delete(self, record_id: str | UUID) -> ServiceResult[ModelT]:
        record = await self.repo.get_or_raise(parse_id(record_id))
        removed = await self.repo.delete(record)
        await self._after_delete(removed)
        logger.info(f"{self.label} {removed.id} deleted")
        return ServiceResult.ok(removed, f"{self.label} deleted successfully")
