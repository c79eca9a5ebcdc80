"""Client-level exception types.

Convention:
- ``ConfigurationError``: raised while constructing a client when the token
  or project id cannot be resolved. The two causes have their own subclasses
  so callers can tell them apart.
- ``ApiError``: raised when the API answers with a non-success status. The
  status code and the raw body are exposed unchanged; there is no finer
  classification (404 and 401 are both ``ApiError``).
- ``ValueError``: for caller input that is rejected before any request is
  sent (empty slug, negative offset, etc.).

JSON decoding and schema errors are not wrapped and reach the caller as
``json.JSONDecodeError`` / ``pydantic.ValidationError``.
"""

from __future__ import annotations


class JustCmsError(Exception):
    """Base class for all errors raised by the JustCMS client."""


class ConfigurationError(JustCmsError):
    """Raised when the client cannot be configured."""


class MissingTokenError(ConfigurationError):
    """Raised when no API token is given or configured."""


class MissingProjectIdError(ConfigurationError):
    """Raised when no project id is given or configured."""


class ApiError(JustCmsError):
    """Raised when the JustCMS API returns a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"JustCMS API error {status_code}: {body}")
        self.status_code = status_code
        self.body = body
