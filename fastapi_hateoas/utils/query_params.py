"""Helpers for pagination query parameter parsing."""

from __future__ import annotations

from typing import Any, Mapping


def parse_page_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Collect ``page[...]`` query parameters into a ``{"page": {...}}`` dict."""
    normalized: dict[str, Any] = {"page": {}}
    for key, value in params.items():
        if value is None:
            continue
        if key.startswith("page[") and key.endswith("]"):
            page_key = key[len("page[") : -1]
            try:
                normalized["page"][page_key] = int(str(value))
            except ValueError:
                normalized["page"][page_key] = str(value)
    return normalized
