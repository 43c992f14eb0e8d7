"""Helpers for hypermedia content negotiation."""

from __future__ import annotations

from typing import Any

ACCEPTABLE_MEDIA_TYPES = {
    "application/hal+json",
    "application/json",
    "application/*",
    "*/*",
}


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def parse_media_type(content_type: str) -> dict[str, Any]:
    """Split a media range into its type and parameters."""
    parts = _split_parameters(content_type)
    media_type = parts[0].lower() if parts else ""
    params: dict[str, Any] = {"media_type": media_type, "params": {}}

    for param in parts[1:]:
        if "=" not in param:
            continue
        name, raw_value = param.split("=", 1)
        raw_value = raw_value.strip()
        if raw_value.startswith('"') and raw_value.endswith('"'):
            raw_value = raw_value[1:-1]
        params["params"][name.strip().lower()] = raw_value
    return params


def accepts_hal(accept: str) -> bool:
    """Return True if an ``Accept`` header allows a HAL response."""
    if not accept.strip():
        return True
    for media_range in accept.split(","):
        parsed = parse_media_type(media_range)
        if parsed["media_type"] not in ACCEPTABLE_MEDIA_TYPES:
            continue
        if parsed["params"].get("q", "1").strip() in {"0", "0.0", "0.00", "0.000"}:
            continue
        return True
    return False
