"""Starlette response classes for fixture documents."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from jsonapi_fixtures.core.exceptions import DocumentEncodingError

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
JSON_MEDIA_TYPE = "application/json"


class FixtureJSONResponse(JSONResponse):
    """JSON response that flattens dataclasses, models and enums before rendering.

    Rendering happens when the response is constructed, so an unencodable
    document raises :class:`DocumentEncodingError` before anything is sent.
    """

    media_type = JSON_MEDIA_TYPE

    def render(self, content: Any) -> bytes:
        try:
            return super().render(jsonable_encoder(content))
        except (TypeError, ValueError) as exc:
            raise DocumentEncodingError(
                f"failed to encode {self.media_type} response: {exc}"
            ) from exc


class JSONAPIResponse(FixtureJSONResponse):
    """Fixture response carrying the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE
