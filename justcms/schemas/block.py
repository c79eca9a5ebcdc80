"""Content block schemas.

A page's ``content`` is a list of blocks tagged by their ``type`` field. Known
kinds decode to their own model; anything else decodes to ``CustomBlock`` with
its extra fields kept verbatim.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Discriminator, Field, Tag

from justcms.schemas.base import CmsModel
from justcms.schemas.image import Image

KNOWN_BLOCK_KINDS: frozenset[str] = frozenset(
    {"header", "list", "embed", "image", "code", "text", "cta", "custom"}
)


class HeaderBlock(CmsModel):
    type: Literal["header"] = "header"
    styles: list[str] = Field(default_factory=list)
    header: str
    subheader: str | None = None
    size: str


class ListOption(CmsModel):
    title: str
    subtitle: str | None = None


class ListBlock(CmsModel):
    type: Literal["list"] = "list"
    styles: list[str] = Field(default_factory=list)
    options: list[ListOption] = Field(default_factory=list)


class EmbedBlock(CmsModel):
    type: Literal["embed"] = "embed"
    styles: list[str] = Field(default_factory=list)
    url: str


class ImageBlock(CmsModel):
    type: Literal["image"] = "image"
    styles: list[str] = Field(default_factory=list)
    images: list[Image] = Field(default_factory=list)


class CodeBlock(CmsModel):
    type: Literal["code"] = "code"
    styles: list[str] = Field(default_factory=list)
    code: str


class TextBlock(CmsModel):
    type: Literal["text"] = "text"
    styles: list[str] = Field(default_factory=list)
    text: str


class CtaBlock(CmsModel):
    type: Literal["cta"] = "cta"
    styles: list[str] = Field(default_factory=list)
    text: str
    url: str
    description: str | None = None


class CustomBlock(CmsModel):
    """Project-defined block; also receives block kinds this client does not know."""

    type: str = "custom"
    styles: list[str] = Field(default_factory=list)
    block_id: str | None = None

    @property
    def fields(self) -> dict[str, Any]:
        """Extra fields sent with the block, keyed by their wire names."""
        return dict(self.model_extra or {})


def _block_kind(value: Any) -> str:
    """Pick the union member for a raw dict or an already-built block."""
    if isinstance(value, dict):
        kind = value.get("type")
    else:
        kind = getattr(value, "type", None)
    if isinstance(kind, str) and kind in KNOWN_BLOCK_KINDS:
        return kind
    return "custom"


ContentBlock = Annotated[
    Union[
        Annotated[HeaderBlock, Tag("header")],
        Annotated[ListBlock, Tag("list")],
        Annotated[EmbedBlock, Tag("embed")],
        Annotated[ImageBlock, Tag("image")],
        Annotated[CodeBlock, Tag("code")],
        Annotated[TextBlock, Tag("text")],
        Annotated[CtaBlock, Tag("cta")],
        Annotated[CustomBlock, Tag("custom")],
    ],
    Discriminator(_block_kind),
]
