"""Error handling middleware rendering vnd.error documents."""

import uuid
from typing import Any

from starlette.responses import JSONResponse

from fastapi_hateoas.core.errors import VND_ERROR_MEDIA_TYPE, HypermediaErrorBuilder
from fastapi_hateoas.logging import get_logger

logger = get_logger(__name__)


class ErrorHandlerMiddleware:
    """Convert unhandled exceptions into vnd.error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.errors = HypermediaErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - last-resort handler
            logref = uuid.uuid4().hex
            logger.exception("Unhandled error (logref=%s)", logref)
            error = self.errors.error_object(
                message=str(exc) or type(exc).__name__,
                logref=logref,
                path=scope.get("path"),
            )
            response = JSONResponse(
                self.errors.error_document([error]),
                status_code=500,
                media_type=VND_ERROR_MEDIA_TYPE,
            )
            await response(scope, receive, send)
