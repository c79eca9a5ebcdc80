"""Client configuration loaded from environment variables."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from justcms.exceptions import MissingProjectIdError, MissingTokenError

DEFAULT_API_URL = "https://api.justcms.co/public"


class Settings(BaseSettings):
    """JustCMS client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Credentials
    justcms_token: str = ""
    justcms_project: str = ""

    # Transport
    justcms_api_url: str = DEFAULT_API_URL
    justcms_timeout_seconds: float = Field(default=30.0, gt=0)


@dataclass(frozen=True)
class Credentials:
    """Resolved token and project id for one client instance."""

    token: str
    project_id: str


def resolve_credentials(
    settings: Settings,
    api_token: str | None = None,
    project_id: str | None = None,
) -> Credentials:
    """Resolve credentials, preferring explicit non-empty arguments over settings.

    Raises MissingTokenError before MissingProjectIdError, so a client with
    neither value configured reports the token first.
    """
    token = api_token or settings.justcms_token
    project = project_id or settings.justcms_project

    if not token:
        raise MissingTokenError("JustCMS API token is required")
    if not project:
        raise MissingProjectIdError("JustCMS project ID is required")
    return Credentials(token=token, project_id=project)
