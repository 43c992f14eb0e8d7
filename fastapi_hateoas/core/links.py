"""Link and link relation value types."""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

_TEMPLATE_VARIABLE = re.compile(r"\{[^{}]+\}")


class LinkRelation(BaseModel):
    """Named role a link or a group of embedded resources plays."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Link relation must not be blank.")
        return value

    @classmethod
    def of(cls, relation: Union[str, "LinkRelation"]) -> "LinkRelation":
        """Return a relation for a name, passing relations through unchanged."""
        if isinstance(relation, LinkRelation):
            return relation
        if relation is None:
            raise ValueError("Link relation must not be None.")
        return cls(value=relation)

    def __str__(self) -> str:
        return self.value


class IanaLinkRelations:
    """Commonly used relations from the IANA link relation registry."""

    ALTERNATE = LinkRelation.of("alternate")
    COLLECTION = LinkRelation.of("collection")
    DESCRIBEDBY = LinkRelation.of("describedby")
    EDIT = LinkRelation.of("edit")
    FIRST = LinkRelation.of("first")
    ITEM = LinkRelation.of("item")
    LAST = LinkRelation.of("last")
    NEXT = LinkRelation.of("next")
    PREV = LinkRelation.of("prev")
    PROFILE = LinkRelation.of("profile")
    RELATED = LinkRelation.of("related")
    SEARCH = LinkRelation.of("search")
    SELF = LinkRelation.of("self")
    UP = LinkRelation.of("up")


class Link(BaseModel):
    """Immutable hypermedia link: a target plus the relation it plays."""

    model_config = ConfigDict(frozen=True)

    href: str
    rel: LinkRelation
    title: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    hreflang: Optional[str] = None
    deprecation: Optional[str] = None
    profile: Optional[str] = None

    @field_validator("rel", mode="before")
    @classmethod
    def _coerce_rel(cls, value: Any) -> Any:
        if isinstance(value, str):
            return LinkRelation.of(value)
        return value

    @classmethod
    def of(
        cls,
        href: str,
        rel: Union[str, LinkRelation] = IanaLinkRelations.SELF,
        **attributes: Any,
    ) -> "Link":
        """Create a link, defaulting to the ``self`` relation."""
        if href is None:
            raise ValueError("Link href must not be None.")
        return cls(href=href, rel=LinkRelation.of(rel), **attributes)

    @property
    def templated(self) -> bool:
        """Return True if the href holds URI template variables."""
        return bool(_TEMPLATE_VARIABLE.search(self.href))

    def has_rel(self, rel: Union[str, LinkRelation]) -> bool:
        return self.rel == LinkRelation.of(rel)

    def with_rel(self, rel: Union[str, LinkRelation]) -> "Link":
        """Return a copy of this link under a different relation."""
        return self.model_copy(update={"rel": LinkRelation.of(rel)})

    def with_self_rel(self) -> "Link":
        return self.with_rel(IanaLinkRelations.SELF)

    def to_attributes(self) -> dict[str, Any]:
        """Return the link object attributes (everything except the relation)."""
        attributes: dict[str, Any] = {"href": self.href}
        if self.templated:
            attributes["templated"] = True
        for field in ("title", "name", "type", "hreflang", "deprecation", "profile"):
            value = getattr(self, field)
            if value is not None:
                attributes[field] = value
        return attributes
