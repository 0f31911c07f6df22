"""Static page table."""

from typing import cast

from sqlalchemy import Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, String

from cms.configs.settings import DESCRIPTION_MAX_LENGTH, PAGE_TITLE_MAX_LENGTH, SLUG_MAX_LENGTH
from cms.models.base import DocumentBase


class PageDB(DocumentBase, table=True):
    """A standalone page such as "About" or "Contact"."""

    __tablename__ = cast("declared_attr[str]", "pages")

    title: str = Field(
        sa_column=Column(String(PAGE_TITLE_MAX_LENGTH), unique=True, nullable=False),
        description="Page title (unique)",
    )
    content: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Page body",
    )
    slug: str = Field(
        sa_column=Column(String(SLUG_MAX_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    meta_description: str | None = Field(
        default=None,
        sa_column=Column(String(DESCRIPTION_MAX_LENGTH)),
        description="SEO description",
    )
