"""Shared test fixtures for the JustCMS client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from justcms.client import JustCmsClient
from justcms.config import Settings

TEST_TOKEN = "test-token"
TEST_PROJECT = "proj-1"
API_PREFIX = f"/public/{TEST_PROJECT}"


def image_payload(*widths: int) -> dict[str, Any]:
    """Build an image whose variants have the given widths, in order."""
    return {
        "alt": "A picture",
        "variants": [
            {
                "url": f"https://cdn.example.com/img-{w}.webp",
                "width": w,
                "height": w // 2,
                "filename": f"img-{w}.webp",
            }
            for w in widths
        ],
    }


def category_payload(slug: str, name: str | None = None) -> dict[str, Any]:
    return {"name": name or slug.title(), "slug": slug}


def page_summary_payload(slug: str = "hello-world") -> dict[str, Any]:
    return {
        "title": "Hello World",
        "subtitle": "First post",
        "coverImage": image_payload(320, 1280),
        "slug": slug,
        "categories": [category_payload("blog")],
        "createdAt": "2025-01-10T12:00:00Z",
        "updatedAt": "2025-01-11T08:30:00Z",
    }


def page_detail_payload(slug: str = "hello-world") -> dict[str, Any]:
    return {
        "title": "Hello World",
        "subtitle": "First post",
        "meta": {"title": "Hello | Site", "description": "An introduction"},
        "coverImage": None,
        "slug": slug,
        "categories": [category_payload("blog")],
        "content": [
            {
                "type": "header",
                "styles": ["Centered"],
                "header": "Welcome",
                "subheader": None,
                "size": "h1",
            },
            {"type": "text", "styles": [], "text": "<p>Hi there</p>"},
            {"type": "image", "styles": ["Wide"], "images": [image_payload(320, 1280)]},
            {
                "type": "custom",
                "styles": ["Highlight"],
                "blockId": "pricing-table",
                "plans": ["free", "pro"],
            },
        ],
        "createdAt": "2025-01-10T12:00:00Z",
        "updatedAt": "2025-01-11T08:30:00Z",
    }


def menu_payload(menu_id: str = "main") -> dict[str, Any]:
    return {
        "id": menu_id,
        "name": "Main menu",
        "items": [
            {
                "title": "Docs",
                "icon": "book",
                "url": "/docs",
                "styles": [],
                "children": [
                    {
                        "title": "API",
                        "subtitle": "Reference",
                        "icon": "",
                        "url": "/docs/api",
                        "styles": ["Bold"],
                        "children": [],
                    }
                ],
            }
        ],
    }


def layout_payload(layout_id: str) -> dict[str, Any]:
    return {
        "id": layout_id,
        "name": f"Layout {layout_id}",
        "items": [
            {
                "label": "Footer text",
                "description": "",
                "uid": f"{layout_id}-footer",
                "type": "text",
                "value": "(c) Example",
            }
        ],
    }


@dataclass
class MockApi:
    """In-memory stand-in for the JustCMS API, keyed by request path."""

    routes: dict[str, tuple[int, Any]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def add(self, endpoint: str, payload: Any, status_code: int = 200) -> None:
        path = f"{API_PREFIX}/{endpoint}" if endpoint else API_PREFIX
        self.routes[path] = (status_code, payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="not found")
        status_code, payload = route
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, json=payload)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def test_settings() -> Settings:
    """Settings with test credentials and no .env lookup."""
    return Settings(
        _env_file=None,
        justcms_token=TEST_TOKEN,
        justcms_project=TEST_PROJECT,
    )


@pytest.fixture
def empty_settings() -> Settings:
    """Settings with no credentials configured."""
    return Settings(_env_file=None, justcms_token="", justcms_project="")


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def client(test_settings: Settings, mock_api: MockApi) -> JustCmsClient:
    """Client whose HTTP traffic is served by ``mock_api``."""
    return JustCmsClient(
        settings=test_settings,
        transport=httpx.MockTransport(mock_api.handler),
    )
