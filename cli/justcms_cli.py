"""Command line access to the JustCMS public API."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel

from justcms.client import JustCmsClient
from justcms.exceptions import ApiError, ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _to_wire(result: Any) -> Any:
    """Convert models (or lists of models) back to their camelCase JSON form."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_to_wire(item) for item in result]
    return result


async def run_command(client: JustCmsClient, args: argparse.Namespace) -> Any:
    """Run the read operation selected by ``args.command``."""
    if args.command == "categories":
        return await client.get_categories()
    if args.command == "pages":
        return await client.get_pages(
            category_slug=args.category,
            start=args.start,
            offset=args.offset,
        )
    if args.command == "page":
        return await client.get_page_by_slug(args.slug, version=args.version)
    if args.command == "menu":
        return await client.get_menu_by_id(args.id)
    if args.command == "layout":
        if len(args.ids) == 1:
            return await client.get_layout_by_id(args.ids[0])
        return await client.get_layouts_by_ids(args.ids)
    msg = f"Unknown command: {args.command}"
    raise ValueError(msg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="justcms",
        description="Fetch content from a JustCMS project",
    )
    parser.add_argument("--token", "-t", help="API token (default: $JUSTCMS_TOKEN)")
    parser.add_argument("--project", "-p", help="Project ID (default: $JUSTCMS_PROJECT)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log HTTP requests")

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("categories", help="List categories")

    pages = subparsers.add_parser("pages", help="List pages")
    pages.add_argument("--category", "-c", help="Only pages in this category slug")
    pages.add_argument("--start", type=int, help="Index of the first page")
    pages.add_argument("--offset", type=int, help="Number of pages to return")

    page = subparsers.add_parser("page", help="Show one page")
    page.add_argument("slug")
    page.add_argument("--version", help="Page version, e.g. draft")

    menu = subparsers.add_parser("menu", help="Show one menu")
    menu.add_argument("id")

    layout = subparsers.add_parser("layout", help="Show one or more layouts")
    layout.add_argument("ids", nargs="+")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        client = JustCmsClient(args.token, args.project)
    except ConfigurationError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    try:
        result = asyncio.run(run_command(client, args))
    except (ApiError, httpx.HTTPError, ValueError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    print(json.dumps(_to_wire(result), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
