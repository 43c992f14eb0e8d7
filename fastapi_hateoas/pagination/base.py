"""Pagination base class producing hypermedia links and page metadata."""

from typing import Any

from fastapi_hateoas.core.links import Link


class PaginationBase:
    """Define the pagination API used with collection builders."""

    def paginate_queryset(
        self, items: list[Any], params: dict[str, Any]
    ) -> list[Any]:
        """Return a paginated slice of items."""
        raise NotImplementedError

    def get_links(self, *, total: int, params: dict[str, Any]) -> list[Link]:
        """Return navigation links (self, first, last, prev, next)."""
        raise NotImplementedError

    def get_meta(self, *, total: int, params: dict[str, Any]) -> dict[str, Any]:
        """Return page metadata (total, limit, offset, etc.)."""
        raise NotImplementedError
