"""Starlette responses that render representation models."""

from __future__ import annotations

from typing import Any, Mapping

from starlette.background import BackgroundTask
from starlette.responses import JSONResponse

from fastapi_hateoas.config import get_settings
from fastapi_hateoas.core.models import RepresentationModel
from fastapi_hateoas.serializers.hal import HAL_MEDIA_TYPE, HALSerializer


class HALResponse(JSONResponse):
    """JSON response that serializes representation models as HAL."""

    media_type = HAL_MEDIA_TYPE

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        serializer: HALSerializer | None = None,
    ) -> None:
        settings = get_settings()
        # render() runs inside the parent constructor
        self.serializer = serializer or HALSerializer.from_settings(settings)
        super().__init__(
            content,
            status_code=status_code,
            headers=headers,
            media_type=media_type or settings.media_type,
            background=background,
        )

    def render(self, content: Any) -> bytes:
        if isinstance(content, RepresentationModel):
            content = self.serializer.to_document(content)
        return super().render(content)
