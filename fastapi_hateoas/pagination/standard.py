"""Offset/limit pagination for collection representations."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from fastapi_hateoas.config import get_settings
from fastapi_hateoas.core.links import IanaLinkRelations, Link

from .base import PaginationBase


class StandardPagination(PaginationBase):
    """Paginate with ``page[offset]`` / ``page[limit]`` query parameters."""

    def __init__(self, *, default_limit: int | None = None, max_limit: int | None = None) -> None:
        settings = get_settings()
        self.default_limit = default_limit or settings.default_page_limit
        self.max_limit = max_limit or settings.max_page_limit

    def _window(self, params: dict[str, Any]) -> tuple[int, int]:
        page = params.get("page", {})
        offset = max(int(page.get("offset", 0)), 0)
        limit = int(page.get("limit", self.default_limit))
        if limit < 1:
            limit = self.default_limit
        return offset, min(limit, self.max_limit)

    def paginate_queryset(self, items: list[Any], params: dict[str, Any]) -> list[Any]:
        """Paginate based on page[offset] and page[limit]."""
        offset, limit = self._window(params)
        return items[offset : offset + limit]

    def get_links(self, *, total: int, params: dict[str, Any]) -> list[Link]:
        """Build navigation links; empty when no base URL is known."""
        base_url = params.get("base_url")
        offset, limit = self._window(params)
        if not base_url:
            return []

        split = urlsplit(base_url)
        kept_query = [
            (key, value)
            for key, value in parse_qsl(split.query)
            if not key.startswith("page[")
        ]

        def build_url(page_offset: int) -> str:
            query = urlencode(
                kept_query + [("page[offset]", page_offset), ("page[limit]", limit)]
            )
            return urlunsplit((split.scheme, split.netloc, split.path, query, split.fragment))

        last_offset = max(0, (max(total - 1, 0) // limit) * limit)
        links = [
            Link.of(build_url(offset), IanaLinkRelations.SELF),
            Link.of(build_url(0), IanaLinkRelations.FIRST),
        ]
        prev_offset = offset - limit
        if prev_offset >= 0:
            links.append(Link.of(build_url(prev_offset), IanaLinkRelations.PREV))
        next_offset = offset + limit
        if next_offset <= last_offset:
            links.append(Link.of(build_url(next_offset), IanaLinkRelations.NEXT))
        links.append(Link.of(build_url(last_offset), IanaLinkRelations.LAST))
        return links

    def get_meta(self, *, total: int, params: dict[str, Any]) -> dict[str, Any]:
        """Build pagination metadata with total, limit, and offset."""
        offset, limit = self._window(params)
        return {
            "total": total,
            "limit": limit,
            "offset": offset,
        }
