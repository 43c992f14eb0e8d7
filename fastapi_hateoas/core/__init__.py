"""Core hypermedia types and builders."""

from .builder import (
    EmbeddedModelBuilder,
    MultipleItemModelBuilder,
    SingleItemModelBuilder,
    embedded,
    entity,
    model,
    sub_model,
)
from .embedded import EmbeddedWrapper, EmbeddedWrappers
from .errors import HateoasError, HypermediaErrorBuilder, SettingsError
from .links import IanaLinkRelations, Link, LinkRelation
from .models import CollectionModel, EntityModel, RepresentationModel, SupportsLinks

__all__ = [
    "CollectionModel",
    "EmbeddedModelBuilder",
    "EmbeddedWrapper",
    "EmbeddedWrappers",
    "EntityModel",
    "HateoasError",
    "HypermediaErrorBuilder",
    "IanaLinkRelations",
    "Link",
    "LinkRelation",
    "MultipleItemModelBuilder",
    "RepresentationModel",
    "SettingsError",
    "SingleItemModelBuilder",
    "SupportsLinks",
    "embedded",
    "entity",
    "model",
    "sub_model",
]
