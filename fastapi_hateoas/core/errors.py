"""Error types and hypermedia error documents (``application/vnd.error+json``)."""

from typing import Any, Iterable

from .links import Link

VND_ERROR_MEDIA_TYPE = "application/vnd.error+json"


class HateoasError(Exception):
    """Base class for errors raised by this package."""


class SettingsError(HateoasError, ValueError):
    """Raised when settings fail validation."""


class HypermediaErrorBuilder:
    """Build vnd.error objects and error documents."""

    def error_object(
        self,
        *,
        message: str | None = None,
        logref: str | None = None,
        path: str | None = None,
        links: Iterable[Link] | None = None,
    ) -> dict[str, Any]:
        """Return a single vnd.error object."""
        error: dict[str, Any] = {}
        if message is not None:
            error["message"] = message
        if logref is not None:
            error["logref"] = logref
        if path is not None:
            error["path"] = path
        link_objects = {link.rel.value: link.to_attributes() for link in links or ()}
        if link_objects:
            error["_links"] = link_objects
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a document for one error, or an embedded list of several."""
        if not errors:
            raise ValueError("Error document must include at least one error.")
        if len(errors) == 1:
            return dict(errors[0])
        return {"total": len(errors), "_embedded": {"errors": list(errors)}}
