"""Fluent builders for hypermedia representations.

Start from one of the entry points and chain calls until ``build()``::

    article = model(ArticleModel(title="Hello")).add_link(Link.of("/articles/1")).build()

    page = (
        model(first)
        .add_model(second)
        .add_link(Link.of("/articles?page=2", IanaLinkRelations.NEXT))
        .build()
    )

    document = (
        sub_model("authors", jane)
        .add_sub_model("comments", first_comment)
        .add_sub_model("authors", john)
        .add_link(Link.of("/articles/1"))
        .build()
    )

Builder methods mutate the builder and return it, so a chained call and a
call on the original variable affect the same instance.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar, Union

from fastapi_hateoas.logging import get_logger

from .embedded import EmbeddedWrapper, EmbeddedWrappers
from .links import Link, LinkRelation
from .models import CollectionModel, EntityModel, SupportsLinks

logger = get_logger(__name__)

M = TypeVar("M", bound=SupportsLinks)


def _require_link(link: Any) -> Link:
    if link is None:
        raise ValueError("Link must not be None.")
    if not isinstance(link, Link):
        raise ValueError(f"Expected a Link, got {type(link).__name__}.")
    return link


def _require_model(model: Any) -> Any:
    if model is None:
        raise ValueError("Model must not be None.")
    return model


class SingleItemModelBuilder(Generic[M]):
    """Builder around exactly one representation model."""

    def __init__(self, model: M) -> None:
        self._model = _require_model(model)
        self._promoted = False

    def _ensure_usable(self) -> None:
        if self._promoted:
            raise RuntimeError(
                "Builder was promoted to a multi-item builder; use the builder returned by add_model()."
            )

    def add_link(self, link: Link) -> "SingleItemModelBuilder[M]":
        """Append ``link`` to the held model in place."""
        self._ensure_usable()
        self._model.add(_require_link(link))
        return self

    def add_model(self, model: M) -> "MultipleItemModelBuilder[M]":
        """Promote to a multi-item builder holding ``[current, model]``."""
        self._ensure_usable()
        promoted = MultipleItemModelBuilder([self._model, _require_model(model)])
        self._promoted = True
        logger.debug("Promoted single-item builder to multi-item builder")
        return promoted

    def build(self) -> M:
        """Return the held model with its accumulated links."""
        self._ensure_usable()
        return self._model


class MultipleItemModelBuilder(Generic[M]):
    """Builder around an ordered collection of models and collection links."""

    def __init__(self, models: Iterable[M], links: Iterable[Link] = ()) -> None:
        self._models: list[M] = [_require_model(item) for item in models]
        self._links: list[Link] = [_require_link(link) for link in links]

    def add_model(self, model: M) -> "MultipleItemModelBuilder[M]":
        self._models.append(_require_model(model))
        return self

    def add_link(self, link: Link) -> "MultipleItemModelBuilder[M]":
        self._links.append(_require_link(link))
        return self

    def build(self) -> CollectionModel[M]:
        """Return a collection of the models and links added so far."""
        logger.debug(
            "Building collection of %d models with %d links",
            len(self._models),
            len(self._links),
        )
        return CollectionModel.of(self._models, self._links)


class EmbeddedModelBuilder(Generic[M]):
    """Builder that groups models under the link relation they are embedded with.

    Relations keep the order in which they were first seen; models keep the
    order in which they were added to their relation.
    """

    def __init__(
        self,
        relation: Union[str, LinkRelation, None] = None,
        model: M | None = None,
        *,
        wrappers: EmbeddedWrappers | None = None,
    ) -> None:
        if wrappers is None:
            # imported here: config imports this package for its errors
            from fastapi_hateoas.config import get_settings

            wrappers = EmbeddedWrappers(prefer_collections=get_settings().prefer_collections)
        self._wrappers = wrappers
        # dict keeps first-seen relation order
        self._entity_models: dict[LinkRelation, list[M]] = {}
        self._links: list[Link] = []
        if relation is not None or model is not None:
            self.add_sub_model(relation, model)

    def add_sub_model(
        self, relation: Union[str, LinkRelation], model: M
    ) -> "EmbeddedModelBuilder[M]":
        """Add ``model`` to the models embedded under ``relation``."""
        key = LinkRelation.of(relation)
        item = _require_model(model)
        self._entity_models.setdefault(key, []).append(item)
        return self

    def add_link(self, link: Link) -> "EmbeddedModelBuilder[M]":
        """Add a link to the collection itself."""
        self._links.append(_require_link(link))
        return self

    def build(self) -> CollectionModel[EmbeddedWrapper]:
        """Flatten the relation groups into one collection of wrapped models."""
        wrapped = [
            self._wrappers.wrap(item, relation)
            for relation, items in self._entity_models.items()
            for item in items
        ]
        logger.debug(
            "Building embedded collection of %d models under %d relations",
            len(wrapped),
            len(self._entity_models),
        )
        return CollectionModel.of(wrapped, self._links)


def entity(content: Any) -> SingleItemModelBuilder[EntityModel[Any]]:
    """Wrap a plain domain object into an :class:`EntityModel` and start a builder."""
    return SingleItemModelBuilder(EntityModel.of(content))


def model(model: M) -> SingleItemModelBuilder[M]:
    """Start a builder from a representation model."""
    return SingleItemModelBuilder(model)


def sub_model(relation: Union[str, LinkRelation], model: M) -> EmbeddedModelBuilder[M]:
    """Start a builder with ``model`` embedded under ``relation``."""
    return EmbeddedModelBuilder(relation, model)


def embedded(*, wrappers: EmbeddedWrappers | None = None) -> EmbeddedModelBuilder[Any]:
    """Start an empty relation builder."""
    return EmbeddedModelBuilder(wrappers=wrappers)
