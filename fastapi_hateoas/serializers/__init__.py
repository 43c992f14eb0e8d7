"""Serializers for hypermedia formats."""

from .hal import HAL_MEDIA_TYPE, HALSerializer, default_relation_provider

__all__ = ["HAL_MEDIA_TYPE", "HALSerializer", "default_relation_provider"]
