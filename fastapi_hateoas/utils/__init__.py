"""Utility helpers for content negotiation and query parsing."""

from .content_negotiation import accepts_hal, parse_media_type
from .query_params import parse_page_params

__all__ = ["accepts_hal", "parse_media_type", "parse_page_params"]
