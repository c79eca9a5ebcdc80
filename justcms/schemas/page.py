"""Page-related schemas."""

from __future__ import annotations

from pydantic import Field

from justcms.schemas.base import CmsModel
from justcms.schemas.block import ContentBlock
from justcms.schemas.category import Category
from justcms.schemas.image import Image


class PageSummary(CmsModel):
    """Page metadata as returned by the listing endpoint."""

    title: str
    subtitle: str | None = None
    cover_image: Image | None = None
    slug: str
    categories: list[Category] = Field(default_factory=list)
    created_at: str
    updated_at: str


class PagesResponse(CmsModel):
    """One page of the listing plus the total number of matching pages."""

    items: list[PageSummary] = Field(default_factory=list)
    total: int


class PageMeta(CmsModel):
    title: str = ""
    description: str = ""


class PageDetail(CmsModel):
    """Full page with its content blocks."""

    title: str
    subtitle: str | None = None
    meta: PageMeta = Field(default_factory=PageMeta)
    cover_image: Image | None = None
    slug: str
    categories: list[Category] = Field(default_factory=list)
    content: list[ContentBlock] = Field(default_factory=list)
    created_at: str
    updated_at: str


class CategoryFilter(CmsModel):
    slug: str


class PageFilters(CmsModel):
    """Listing filters, mirroring the ``filter.category.slug`` query parameter."""

    category: CategoryFilter | None = None
