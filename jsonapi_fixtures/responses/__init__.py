"""Fixture responses for JSON:API mock handlers."""

from .base import JSON_MEDIA_TYPE, JSONAPI_MEDIA_TYPE, FixtureJSONResponse, JSONAPIResponse
from .writers import error_response, json_response, resource_list_response, resource_response

__all__ = [
    "JSON_MEDIA_TYPE",
    "JSONAPI_MEDIA_TYPE",
    "FixtureJSONResponse",
    "JSONAPIResponse",
    "error_response",
    "json_response",
    "resource_list_response",
    "resource_response",
]
