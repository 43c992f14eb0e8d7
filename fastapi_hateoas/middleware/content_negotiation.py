"""Content negotiation middleware for HAL responses."""

from typing import Any

from starlette.responses import JSONResponse

from fastapi_hateoas.core.errors import VND_ERROR_MEDIA_TYPE, HypermediaErrorBuilder
from fastapi_hateoas.utils.content_negotiation import accepts_hal


class ContentNegotiationMiddleware:
    """Reject requests whose ``Accept`` header excludes HAL and JSON."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.errors = HypermediaErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Check the Accept header before passing to the downstream app."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        headers = {k.decode().lower(): v.decode() for k, v in scope.get("headers", [])}
        accept = headers.get("accept", "")

        if not accepts_hal(accept):
            error = self.errors.error_object(
                message=f"Not Acceptable: {accept}", path=scope.get("path")
            )
            response = JSONResponse(
                self.errors.error_document([error]),
                status_code=406,
                media_type=VND_ERROR_MEDIA_TYPE,
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
