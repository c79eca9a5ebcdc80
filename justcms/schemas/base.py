"""Shared base model for JustCMS wire shapes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CmsModel(BaseModel):
    """Immutable snapshot of server data.

    Attributes are snake_case in Python and camelCase on the wire
    (``cover_image`` <-> ``coverImage``). Either spelling is accepted on input.
    Fields the server sends that are not declared here are kept under their
    wire names and written back out by ``model_dump``.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )
