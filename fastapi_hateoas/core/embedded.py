"""Wrapping of values that are embedded in a representation under a relation."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .links import LinkRelation

_COLLECTION_TYPES = (list, tuple, set, frozenset)


class EmbeddedWrapper(BaseModel):
    """A value tagged with the relation it is embedded under.

    ``rel`` may be ``None``, in which case the serializer derives one from the
    value's type. A collection wrapper without elements is an empty
    placeholder; ``element_type`` then names what the collection would hold.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any
    rel: Optional[LinkRelation] = None
    collection_value: bool = False
    element_type: Optional[Any] = None

    @field_validator("rel", mode="before")
    @classmethod
    def _coerce_rel(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LinkRelation.of(value)
        return value

    @property
    def is_empty(self) -> bool:
        return self.collection_value and not self.value

    def has_rel(self, rel: Union[str, LinkRelation]) -> bool:
        return self.rel is not None and self.rel == LinkRelation.of(rel)

    def get_rel_target_type(self) -> Optional[type]:
        """Return the type a relation should be derived from."""
        if self.element_type is not None:
            return self.element_type
        if self.collection_value:
            return type(self.value[0]) if self.value else None
        return type(self.value)


class EmbeddedWrappers:
    """Create :class:`EmbeddedWrapper` instances for embeddable values."""

    def __init__(self, prefer_collections: bool) -> None:
        self.prefer_collections = prefer_collections

    def wrap(
        self, source: Any, rel: Union[str, LinkRelation, None] = None
    ) -> EmbeddedWrapper:
        """Wrap ``source``; existing wrappers are returned unchanged."""
        if source is None:
            raise ValueError("Embedded value must not be None.")
        if isinstance(source, EmbeddedWrapper):
            return source
        relation = None if rel is None else LinkRelation.of(rel)
        if isinstance(source, _COLLECTION_TYPES):
            return EmbeddedWrapper(
                value=list(source), rel=relation, collection_value=True
            )
        if self.prefer_collections:
            return EmbeddedWrapper(value=[source], rel=relation, collection_value=True)
        return EmbeddedWrapper(value=source, rel=relation)

    def empty_collection_of(
        self, element_type: type, rel: Union[str, LinkRelation, None] = None
    ) -> EmbeddedWrapper:
        """Return a placeholder for a relation that has no values."""
        if element_type is None:
            raise ValueError("Element type must not be None.")
        return EmbeddedWrapper(
            value=[],
            rel=None if rel is None else LinkRelation.of(rel),
            collection_value=True,
            element_type=element_type,
        )
