"""Typed response shapes for the JustCMS public API."""

from justcms.schemas.block import (
    CodeBlock,
    ContentBlock,
    CtaBlock,
    CustomBlock,
    EmbedBlock,
    HeaderBlock,
    ImageBlock,
    ListBlock,
    ListOption,
    TextBlock,
)
from justcms.schemas.category import CategoriesResponse, Category
from justcms.schemas.image import Image, ImageVariant
from justcms.schemas.layout import Layout, LayoutItem
from justcms.schemas.menu import Menu, MenuItem
from justcms.schemas.page import (
    CategoryFilter,
    PageDetail,
    PageFilters,
    PageMeta,
    PagesResponse,
    PageSummary,
)

__all__ = [
    "CategoriesResponse",
    "Category",
    "CategoryFilter",
    "CodeBlock",
    "ContentBlock",
    "CtaBlock",
    "CustomBlock",
    "EmbedBlock",
    "HeaderBlock",
    "Image",
    "ImageBlock",
    "ImageVariant",
    "Layout",
    "LayoutItem",
    "ListBlock",
    "ListOption",
    "Menu",
    "MenuItem",
    "PageDetail",
    "PageFilters",
    "PageMeta",
    "PageSummary",
    "PagesResponse",
    "TextBlock",
]
