"""Uploaded media table."""

from typing import cast

from sqlalchemy import Integer
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, String

from cms.configs.settings import FILENAME_MAX_LENGTH, SLUG_MAX_LENGTH
from cms.models.base import DocumentBase


class MediaDB(DocumentBase, table=True):
    """Metadata of a file stored under the uploads directory."""

    __tablename__ = cast("declared_attr[str]", "media")

    filename: str = Field(
        sa_column=Column(String(FILENAME_MAX_LENGTH), nullable=False),
        description="Original file name",
    )
    filepath: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Path relative to the uploads mount, e.g. uploads/images/<id>.png",
    )
    mimetype: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Content type",
    )
    size: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Size in bytes",
    )
    slug: str = Field(
        sa_column=Column(String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
