"""Async client for the JustCMS public API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from justcms.config import Credentials, Settings, resolve_credentials
from justcms.exceptions import ApiError
from justcms.schemas.category import CategoriesResponse, Category
from justcms.schemas.layout import Layout
from justcms.schemas.menu import Menu
from justcms.schemas.page import PageDetail, PageFilters, PagesResponse

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)

LAYOUT_ID_SEPARATOR = ";"

_LAYOUT_LIST = TypeAdapter(list[Layout])


def path_segment(value: str) -> str:
    """Percent-quote one path segment so ``/``, ``?`` and ``#`` stay inside it."""
    return quote(value, safe="")


def _require_non_empty(value: str, name: str) -> str:
    if not value:
        msg = f"{name} must not be empty"
        raise ValueError(msg)
    return value


def _require_non_negative(value: int | None, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be a non-negative integer"
        raise ValueError(msg)
    return value


def build_query(params: Mapping[str, object] | None) -> dict[str, str]:
    """Stringify query parameters, dropping those whose value is None."""
    if not params:
        return {}
    return {key: str(value) for key, value in params.items() if value is not None}


class JustCmsClient:
    """Read-only client for one JustCMS project.

    The token and project id are resolved once, at construction, from the
    explicit arguments or from ``Settings`` (``JUSTCMS_TOKEN`` /
    ``JUSTCMS_PROJECT``). Every call opens its own HTTP connection; nothing is
    cached or retried.
    """

    def __init__(
        self,
        api_token: str | None = None,
        project_id: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings if settings is not None else Settings()
        self.credentials: Credentials = resolve_credentials(self.settings, api_token, project_id)
        self.base_url = self.settings.justcms_api_url.rstrip("/")
        self._transport = transport

    @property
    def project_id(self) -> str:
        return self.credentials.project_id

    def build_url(self, endpoint: str = "") -> str:
        """Return ``<base>/<project>`` with ``/<endpoint>`` appended when given."""
        url = f"{self.base_url}/{self.credentials.project_id}"
        if endpoint:
            url = f"{url}/{endpoint}"
        return url

    async def _get(self, endpoint: str = "", params: Mapping[str, object] | None = None) -> Any:
        """GET an endpoint and return the decoded JSON body.

        Raises ApiError with the status code and full body text on any
        non-2xx response. JSON decoding errors are not wrapped.
        """
        url = self.build_url(endpoint)
        query = build_query(params)
        logger.debug("GET %s %s", url, query)

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.settings.justcms_timeout_seconds,
        ) as http_client:
            resp = await http_client.get(
                url,
                params=query,
                headers={"Authorization": f"Bearer {self.credentials.token}"},
            )

        if not resp.is_success:
            logger.warning("JustCMS API error %s for %s", resp.status_code, url)
            raise ApiError(resp.status_code, resp.text)
        return resp.json()

    async def get_categories(self) -> list[Category]:
        """Return all categories of the project."""
        data = await self._get()
        return CategoriesResponse.model_validate(data).categories

    async def get_pages(
        self,
        category_slug: str | None = None,
        start: int | None = None,
        offset: int | None = None,
        *,
        filters: PageFilters | None = None,
    ) -> PagesResponse:
        """Return pages, optionally filtered by category and paginated.

        ``start`` is the index of the first page and ``offset`` the number of
        pages to return. ``filters`` is an alternative way of passing the
        category slug; an explicit ``category_slug`` wins.
        """
        _require_non_negative(start, "start")
        _require_non_negative(offset, "offset")
        if not category_slug and filters is not None and filters.category is not None:
            category_slug = filters.category.slug

        query: dict[str, object] = {}
        if category_slug:
            query["filter.category.slug"] = category_slug
        if start is not None:
            query["start"] = start
        if offset is not None:
            query["offset"] = offset
        data = await self._get("pages", query)
        return PagesResponse.model_validate(data)

    async def get_page_by_slug(self, slug: str, version: str | None = None) -> PageDetail:
        """Return a single page. ``version`` selects e.g. the ``draft`` revision."""
        _require_non_empty(slug, "slug")
        query: dict[str, object] = {}
        if version:
            query["v"] = version
        data = await self._get(f"pages/{path_segment(slug)}", query)
        return PageDetail.model_validate(data)

    async def get_menu_by_id(self, menu_id: str) -> Menu:
        _require_non_empty(menu_id, "menu_id")
        data = await self._get(f"menus/{path_segment(menu_id)}")
        return Menu.model_validate(data)

    async def get_layout_by_id(self, layout_id: str) -> Layout:
        _require_non_empty(layout_id, "layout_id")
        data = await self._get(f"layouts/{path_segment(layout_id)}")
        return Layout.model_validate(data)

    async def get_layouts_by_ids(self, layout_ids: Sequence[str]) -> list[Layout]:
        """Fetch several layouts in one request, in the order of ``layout_ids``."""
        if isinstance(layout_ids, str):
            msg = "layout_ids must be a sequence of ids, not a string"
            raise ValueError(msg)
        if not layout_ids:
            msg = "layout_ids must not be empty"
            raise ValueError(msg)
        for layout_id in layout_ids:
            _require_non_empty(layout_id, "layout id")
            if LAYOUT_ID_SEPARATOR in layout_id:
                msg = f"layout id must not contain {LAYOUT_ID_SEPARATOR!r}: {layout_id}"
                raise ValueError(msg)

        joined = LAYOUT_ID_SEPARATOR.join(path_segment(layout_id) for layout_id in layout_ids)
        data = await self._get(f"layouts/{joined}")
        return _LAYOUT_LIST.validate_python(data)
