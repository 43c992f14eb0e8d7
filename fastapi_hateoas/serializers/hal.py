"""HAL (``application/hal+json``) serializer for representation models."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Mapping

from fastapi.encoders import jsonable_encoder

from fastapi_hateoas.config import HateoasSettings
from fastapi_hateoas.core.embedded import EmbeddedWrapper, EmbeddedWrappers
from fastapi_hateoas.core.links import Link
from fastapi_hateoas.core.models import CollectionModel, EntityModel, RepresentationModel

HAL_MEDIA_TYPE = "application/hal+json"

RelationProvider = Callable[[type, bool], str]

_RESERVED_FIELDS = {"links", "content"}


def default_relation_provider(target_type: type, collection: bool) -> str:
    """Derive a relation from a type name: ``articleModel`` / ``articleModelList``."""
    name = target_type.__name__.split("[", 1)[0]
    relation = name[:1].lower() + name[1:]
    return f"{relation}List" if collection else relation


class HALSerializer:
    """Serialize representation models into HAL documents."""

    def __init__(
        self,
        *,
        enforce_embedded_collections: bool = False,
        relation_provider: RelationProvider = default_relation_provider,
    ) -> None:
        self.enforce_embedded_collections = enforce_embedded_collections
        self.relation_provider = relation_provider
        self.wrappers = EmbeddedWrappers(prefer_collections=True)

    @classmethod
    def from_settings(cls, settings: HateoasSettings) -> "HALSerializer":
        return cls(enforce_embedded_collections=settings.enforce_embedded_collections)

    def to_document(self, model: RepresentationModel) -> dict[str, Any]:
        """Serialize a model, its embedded content and its links."""
        if not isinstance(model, RepresentationModel):
            raise ValueError(f"Cannot serialize {type(model).__name__} as HAL.")
        document: dict[str, Any] = {}
        if isinstance(model, EntityModel):
            document.update(self.get_content_attributes(model.content))
        document.update(self.get_attributes(model))
        if isinstance(model, CollectionModel):
            embedded = self.render_embedded(model.content)
            if embedded:
                document["_embedded"] = embedded
        if model.links:
            document["_links"] = self.render_links(model.links)
        return document

    def to_many(self, models: Iterable[RepresentationModel]) -> list[dict[str, Any]]:
        return [self.to_document(model) for model in models]

    def render_links(self, links: Iterable[Link]) -> dict[str, Any]:
        """Group links by relation; repeated relations render as arrays."""
        rendered: dict[str, Any] = {}
        for link in links:
            rel = link.rel.value
            attributes = link.to_attributes()
            existing = rendered.get(rel)
            if existing is None:
                rendered[rel] = attributes
            elif isinstance(existing, list):
                existing.append(attributes)
            else:
                rendered[rel] = [existing, attributes]
        return rendered

    def render_embedded(self, content: Iterable[Any]) -> dict[str, Any]:
        """Group embedded values under their relations."""
        embedded: dict[str, Any] = {}
        for item in content:
            wrapper = item if isinstance(item, EmbeddedWrapper) else self.wrappers.wrap(item)
            rel = self.relation_for(wrapper)
            existing = embedded.get(rel)
            if wrapper.collection_value:
                values = [self.render_value(value) for value in wrapper.value]
                if existing is None:
                    embedded[rel] = values
                elif isinstance(existing, list):
                    existing.extend(values)
                else:
                    embedded[rel] = [existing, *values]
                continue
            value = self.render_value(wrapper.value)
            if existing is None:
                embedded[rel] = [value] if self.enforce_embedded_collections else value
            elif isinstance(existing, list):
                existing.append(value)
            else:
                embedded[rel] = [existing, value]
        return embedded

    def relation_for(self, wrapper: EmbeddedWrapper) -> str:
        """Return the wrapper's relation, deriving one from the value type if unset."""
        if wrapper.rel is not None:
            return wrapper.rel.value
        if wrapper.collection_value and wrapper.value:
            sample = wrapper.value[0]
        elif wrapper.collection_value:
            sample = None
        else:
            sample = wrapper.value
        if isinstance(sample, EntityModel):
            target_type = type(sample.content)
        else:
            target_type = wrapper.get_rel_target_type()
        if target_type is None:
            raise ValueError("Cannot derive a relation for an empty embedded collection.")
        return self.relation_provider(target_type, wrapper.collection_value)

    def render_value(self, value: Any) -> Any:
        if isinstance(value, RepresentationModel):
            return self.to_document(value)
        return jsonable_encoder(value)

    def get_attributes(self, model: RepresentationModel) -> dict[str, Any]:
        """Return the model's own fields, excluding links and wrapped content."""
        return {
            name: self.render_value(getattr(model, name))
            for name in type(model).model_fields
            if name not in _RESERVED_FIELDS
        }

    def get_content_attributes(self, content: Any) -> dict[str, Any]:
        """Return entity content unwrapped into top-level properties."""
        if isinstance(content, RepresentationModel):
            document = self.to_document(content)
            document.pop("_links", None)
            return document
        if (
            isinstance(content, Mapping)
            or dataclasses.is_dataclass(content)
            or hasattr(content, "model_dump")
        ):
            encoded = jsonable_encoder(content)
        elif hasattr(content, "__dict__"):
            encoded = jsonable_encoder(
                {
                    key: value
                    for key, value in vars(content).items()
                    if not key.startswith("_")
                }
            )
        else:
            encoded = jsonable_encoder(content)
        if isinstance(encoded, dict):
            return encoded
        return {"content": encoded}
