"""Snapshot of an incoming request, handed to fixture handlers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from starlette.datastructures import Headers, QueryParams
from starlette.requests import Request

from jsonapi_fixtures.schemas.resource import JSONAPIDocument, JSONAPIResource
from jsonapi_fixtures.utils.content_negotiation import is_jsonapi_media_type


@dataclass
class FixtureRequest:
    """What the client sent: method, path, query, headers and the raw body.

    Handlers receive this instead of a live Starlette request so they can be
    plain functions, and the server keeps each one for later assertions.
    """

    method: str
    path: str
    url: str
    path_params: dict[str, Any] = field(default_factory=dict)
    query_params: QueryParams = field(default_factory=QueryParams)
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    @classmethod
    async def from_request(cls, request: Request) -> FixtureRequest:
        """Read the body and copy the request fields."""
        body = await request.body()
        return cls(
            method=request.method,
            path=request.url.path,
            url=str(request.url),
            path_params=dict(request.path_params),
            query_params=request.query_params,
            headers=request.headers,
            body=body,
        )

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "")

    def is_jsonapi(self) -> bool:
        """Return True if the request declares the bare JSON:API media type."""
        return is_jsonapi_media_type(self.content_type)

    def json(self) -> Any:
        """Decode the body as JSON; an empty body decodes to None."""
        if not self.body:
            return None
        return json.loads(self.body)

    def document(self) -> JSONAPIDocument:
        """Validate the body as a JSON:API document."""
        return JSONAPIDocument.model_validate_json(self.body)

    def attribute(self, name: str) -> Any:
        """Return one attribute of the single resource in the body.

        Raises:
            KeyError: If the body carries no such attribute.
            ValueError: If the body is not a single-resource document.
        """
        data = self.document().data
        if not isinstance(data, JSONAPIResource):
            raise ValueError("request body does not hold a single resource")
        return data.attributes[name]
