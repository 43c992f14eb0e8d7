"""Representation models: domain data augmented with hypermedia links."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Protocol, TypeVar, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .links import Link, LinkRelation

T = TypeVar("T")


@runtime_checkable
class SupportsLinks(Protocol):
    """Anything a link can be attached to in place."""

    def add(self, link: Link) -> Any:
        ...


class RepresentationModel(BaseModel):
    """Base class for models that carry an ordered list of links.

    Subclasses declare their own fields; links are appended in place with
    :meth:`add` and rendered separately by the serializers.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    links: list[Link] = Field(default_factory=list)

    def add(self, *links: Link) -> "RepresentationModel":
        """Append links in order and return the model."""
        for link in links:
            if not isinstance(link, Link):
                raise ValueError("Only Link instances can be added to a model.")
            self.links.append(link)
        return self

    def has_link(self, rel: Union[str, LinkRelation]) -> bool:
        return self.get_link(rel) is not None

    def get_link(self, rel: Union[str, LinkRelation]) -> Link | None:
        """Return the first link with the given relation, if any."""
        relation = LinkRelation.of(rel)
        for link in self.links:
            if link.rel == relation:
                return link
        return None

    def get_links(self, rel: Union[str, LinkRelation] | None = None) -> list[Link]:
        """Return all links, or the links with the given relation."""
        if rel is None:
            return list(self.links)
        relation = LinkRelation.of(rel)
        return [link for link in self.links if link.rel == relation]

    def get_required_link(self, rel: Union[str, LinkRelation]) -> Link:
        link = self.get_link(rel)
        if link is None:
            raise LookupError(f"No link with rel '{LinkRelation.of(rel)}' found.")
        return link


class EntityModel(RepresentationModel, Generic[T]):
    """Representation model wrapping a single plain domain object."""

    content: T

    @classmethod
    def of(cls, content: T, *links: Link) -> "EntityModel[T]":
        if content is None:
            raise ValueError("Entity content must not be None.")
        model = cls(content=content)
        model.add(*links)
        return model


class CollectionModel(RepresentationModel, Generic[T]):
    """Representation model wrapping an ordered, immutable sequence of items."""

    content: tuple[T, ...] = ()

    @classmethod
    def of(
        cls, content: Iterable[T], links: Iterable[Link] = ()
    ) -> "CollectionModel[T]":
        """Pair copies of ``content`` and ``links`` into a collection."""
        model = cls(content=tuple(content))
        model.add(*links)
        return model

    @classmethod
    def empty(cls, links: Iterable[Link] = ()) -> "CollectionModel[T]":
        return cls.of((), links)
