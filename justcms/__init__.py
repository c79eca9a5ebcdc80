"""Typed async client for the JustCMS headless CMS."""

from justcms.client import JustCmsClient
from justcms.config import Credentials, Settings, resolve_credentials
from justcms.exceptions import (
    ApiError,
    ConfigurationError,
    JustCmsError,
    MissingProjectIdError,
    MissingTokenError,
)
from justcms.services.content_service import (
    block_has_style,
    first_image,
    has_category,
    large_image_variant,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "Credentials",
    "JustCmsClient",
    "JustCmsError",
    "MissingProjectIdError",
    "MissingTokenError",
    "Settings",
    "block_has_style",
    "first_image",
    "has_category",
    "large_image_variant",
    "resolve_credentials",
]
