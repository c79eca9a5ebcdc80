"""Layout schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from justcms.schemas.base import CmsModel


class LayoutItem(CmsModel):
    """Typed layout entry. The shape of ``value`` depends on ``type``."""

    label: str
    description: str = ""
    uid: str
    type: str
    value: Any = None


class Layout(CmsModel):
    id: str
    name: str
    items: list[LayoutItem] = Field(default_factory=list)
