"""Typed runtime settings loaded from ``HATEOAS_*`` environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fastapi_hateoas.core.errors import SettingsError
from fastapi_hateoas.logging import get_logger

__all__ = ["HateoasSettings", "get_settings", "load_settings"]

logger = get_logger(__name__)

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


class HateoasSettings(BaseSettings):
    """Settings for rendering hypermedia responses."""

    model_config = SettingsConfigDict(env_prefix="HATEOAS_", frozen=True, extra="ignore")

    media_type: str = Field(
        default="application/hal+json", description="Media type of rendered responses"
    )
    prefer_collections: bool = Field(
        default=False,
        description="Wrap single embedded values as one-element collections",
    )
    enforce_embedded_collections: bool = Field(
        default=False,
        description="Render every embedded relation as an array",
    )
    default_page_limit: int = Field(default=10, ge=1, description="Page size when none is requested")
    max_page_limit: int = Field(default=100, ge=1, description="Largest page size a client may request")
    log_level: Optional[str] = Field(default=None, description="Package log level")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @model_validator(mode="after")
    def _check_page_limits(self) -> "HateoasSettings":
        if self.default_page_limit > self.max_page_limit:
            raise ValueError("default_page_limit must not exceed max_page_limit")
        return self

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level) if self.log_level else logging.NOTSET


def load_settings(**overrides: object) -> HateoasSettings:
    """Build fresh settings, applying ``overrides`` over the environment."""
    try:
        return HateoasSettings(**overrides)
    except ValidationError as exc:
        logger.exception("Settings loading failed")
        raise SettingsError(f"Failed to load settings: {exc}") from exc


@lru_cache(maxsize=1)
def _cached_settings() -> HateoasSettings:
    return load_settings()


def get_settings(*, reload: bool = False) -> HateoasSettings:
    """Return process-wide settings, re-reading the environment on ``reload``."""
    if reload:
        _cached_settings.cache_clear()
    return _cached_settings()
