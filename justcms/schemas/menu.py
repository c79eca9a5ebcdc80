"""Menu schemas."""

from __future__ import annotations

from pydantic import Field

from justcms.schemas.base import CmsModel


class MenuItem(CmsModel):
    """Menu entry; ``children`` nest to any depth."""

    title: str
    subtitle: str | None = None
    icon: str = ""
    url: str = ""
    styles: list[str] = Field(default_factory=list)
    children: list[MenuItem] = Field(default_factory=list)


class Menu(CmsModel):
    id: str
    name: str
    items: list[MenuItem] = Field(default_factory=list)
