"""Image schemas."""

from __future__ import annotations

from pydantic import Field

from justcms.schemas.base import CmsModel


class ImageVariant(CmsModel):
    """One rendition of an image."""

    url: str
    width: int
    height: int
    filename: str


class Image(CmsModel):
    """Image with its renditions.

    Variants keep server order: index 0 is the default rendition and index 1
    the large one.
    """

    alt: str = ""
    variants: list[ImageVariant] = Field(default_factory=list)
