"""Category schemas."""

from __future__ import annotations

from pydantic import Field

from justcms.schemas.base import CmsModel


class Category(CmsModel):
    """Page category, unique by slug within a project."""

    name: str
    slug: str


class CategoriesResponse(CmsModel):
    """Body of the project root endpoint."""

    categories: list[Category] = Field(default_factory=list)
