"""Fixture response helpers for use inside mock server handlers.

Each helper takes an HTTP status code and a payload and returns exactly one
response::

    def get_widget(request):
        return resource_response(200, Widget(id="42", name="bolt"))

    server.handle("GET /widgets/{id}", get_widget)
"""

from __future__ import annotations

from typing import Any

from jsonapi_fixtures.core.document import JSONAPIDocumentBuilder
from jsonapi_fixtures.core.errors import JSONAPIErrorBuilder
from jsonapi_fixtures.serializers.base import FixtureSerializer

from .base import FixtureJSONResponse, JSONAPIResponse


def resource_response(status_code: int, record: Any) -> JSONAPIResponse:
    """Return a single-resource JSON:API response for an annotated record."""
    resource = FixtureSerializer().to_resource(record)
    document = JSONAPIDocumentBuilder().build_single(resource)
    return JSONAPIResponse(document, status_code=status_code)


def resource_list_response(status_code: int, records: Any) -> JSONAPIResponse:
    """Return a collection JSON:API response; relationships are not included.

    Raises:
        FixtureContractError: If ``records`` is not a sequence.
    """
    resources = FixtureSerializer().to_many(records)
    document = JSONAPIDocumentBuilder().build_collection(resources)
    return JSONAPIResponse(document, status_code=status_code)


def error_response(status_code: int, detail: str) -> JSONAPIResponse:
    """Return a JSON:API error response with one error object."""
    document = JSONAPIErrorBuilder().error_document(status_code, detail)
    return JSONAPIResponse(document, status_code=status_code)


def json_response(status_code: int, value: Any) -> FixtureJSONResponse:
    """Return a plain JSON response for endpoints that are not JSON:API."""
    return FixtureJSONResponse(value, status_code=status_code)
