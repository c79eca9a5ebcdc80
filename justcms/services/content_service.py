"""Helpers over fetched pages, blocks and images. No I/O."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from justcms.schemas.block import ContentBlock, ImageBlock
    from justcms.schemas.image import Image, ImageVariant
    from justcms.schemas.page import PageDetail


def block_has_style(block: ContentBlock, style: str) -> bool:
    """Return True if the block carries ``style``, ignoring case."""
    wanted = style.lower()
    return any(s.lower() == wanted for s in block.styles)


def large_image_variant(image: Image) -> ImageVariant:
    """Return the large rendition, which the API always sends second.

    Raises IndexError when the image has fewer than two variants.
    """
    return image.variants[1]


def first_image(block: ImageBlock) -> Image:
    """Return the first image of an image block (IndexError when empty)."""
    return block.images[0]


def has_category(page: PageDetail, category_slug: str) -> bool:
    """Return True if one of the page's categories has exactly this slug."""
    return any(category.slug == category_slug for category in page.categories)
