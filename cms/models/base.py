"""Shared columns and column types for the content tables."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from cms.utils.helpers import utcnow

# Ordered id sequences: JSONB on PostgreSQL, plain JSON elsewhere
IdList = JSON().with_variant(JSONB(), "postgresql")


class DocumentBase(SQLModel):
    """Identifier and timestamps carried by every stored entity."""

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Record ID",
    )
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        nullable=False,
        index=True,
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_type=DateTime(timezone=True),
        description="Last update timestamp",
    )
