"""Fluent builders for hypermedia (HAL) responses in FastAPI."""

from .config import HateoasSettings, get_settings, load_settings
from .core.builder import (
    EmbeddedModelBuilder,
    MultipleItemModelBuilder,
    SingleItemModelBuilder,
    embedded,
    entity,
    model,
    sub_model,
)
from .core.embedded import EmbeddedWrapper, EmbeddedWrappers
from .core.links import IanaLinkRelations, Link, LinkRelation
from .core.models import CollectionModel, EntityModel, RepresentationModel
from .logging import configure_logging
from .responses import HALResponse
from .serializers.hal import HALSerializer

__all__ = [
    "CollectionModel",
    "EmbeddedModelBuilder",
    "EmbeddedWrapper",
    "EmbeddedWrappers",
    "EntityModel",
    "HALResponse",
    "HALSerializer",
    "HateoasSettings",
    "IanaLinkRelations",
    "Link",
    "LinkRelation",
    "MultipleItemModelBuilder",
    "RepresentationModel",
    "SingleItemModelBuilder",
    "configure_logging",
    "embedded",
    "entity",
    "get_settings",
    "load_settings",
    "model",
    "sub_model",
]
